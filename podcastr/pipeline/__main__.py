#!/usr/bin/env python3
"""
CLI interface for the podcast generation pipeline.

The pipeline turns a web page into a packaged podcast episode:
    1. Load the page content
    2. Generate the podcast script
    3. Generate description, social media posts, audio and cover image (in parallel)
    4. Validate every artifact
    5. Pack everything into a ZIP archive in the temp directory
    6. Show the usage costs

Azure OpenAI settings are read from the environment (or .env):
    AZURE_OPENAI_ENDPOINT, AZURE_OPENAI_API_KEY, AZURE_OPENAI_CHAT_MODEL,
    AZURE_OPENAI_AUDIO_MODEL, AZURE_OPENAI_IMAGE_MODEL, AZURE_OPENAI_API_VERSION
Missing values are asked for interactively.

Usage:
    uv run -m podcastr.pipeline
    uv run -m podcastr.pipeline --verbose
    podcastr --log-file logs/run.log
"""

import argparse
import asyncio
import logging
import sys

from podcastr.config import PodcastrConfig
from podcastr.llm import PodcastContentGenerator, init_llm_openai
from podcastr.logger import DEFAULT_LOG_FILE, setup_logging
from podcastr.usage import UsageTracker
from .console import OperatorConsole
from .orchestrator import PipelineOrchestrator


LOGGER_NAMES = ["pipeline", "llm", "ingestion", "storage", "usage"]

CONFIG_PROMPTS = {
    "endpoint": "Enter your [yellow]Azure OpenAI endpoint[/] URL:",
    "api_key": "Enter your [yellow]Azure OpenAI key[/]:",
    "chat_model": "Enter your [yellow]Azure OpenAI Chat model[/] name:",
    "audio_model": "Enter your [yellow]Azure OpenAI Audio model[/] name:",
    "image_model": "Enter your [yellow]Azure OpenAI Image model[/] name:",
}


def parse_arguments() -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Podcastr - Turn a web page into a podcast episode (script, description, social posts, audio, cover)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Everything else is asked interactively: content URL, podcast name,
language and voice. At the end of each run you can start another one.

Notes:
  - Azure OpenAI settings come from the environment or .env, missing ones are prompted
  - The archive is written to the system temp directory
  - Logs written to logs/podcastr.log
        """,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging output",
    )
    parser.add_argument(
        "--log-file",
        default=DEFAULT_LOG_FILE,
        metavar="PATH",
        help=f"Log file path (default: {DEFAULT_LOG_FILE})",
    )
    return parser.parse_args()


def complete_config(config: PodcastrConfig, console: OperatorConsole) -> PodcastrConfig:
    """
    Ask the operator for every configuration value not set in the environment.

    Args:
        config: Configuration loaded from the environment
        console: Operator console

    Returns:
        The same configuration object, completed
    """
    for name in config.missing_fields():
        prompt = CONFIG_PROMPTS[name]
        if name == "endpoint":
            value = console.ask_url(prompt, require_https=True)
        else:
            value = console.ask_text(prompt, max_length=None)
        setattr(config, name, value)
    return config


def main():
    """Main entry point for the pipeline CLI."""
    args = parse_arguments()

    for name in LOGGER_NAMES:
        setup_logging(logger_name=name, log_file=args.log_file, verbose=args.verbose)
    logger = logging.getLogger("pipeline")

    console = OperatorConsole()
    console.show_header()

    try:
        config = complete_config(PodcastrConfig.from_env(), console)
        client = init_llm_openai(config)
    except KeyboardInterrupt:
        logger.info("Pipeline interrupted by operator")
        console.write_error("Interrupted.")
        sys.exit(130)
    except ValueError as e:
        logger.error(f"Pipeline configuration failed: {e}")
        console.write_error(f"✗ {e}")
        sys.exit(1)

    tracker = UsageTracker()
    generator = PodcastContentGenerator(client, config, tracker)
    orchestrator = PipelineOrchestrator(generator, tracker, console)

    try:
        asyncio.run(orchestrator.run())
    except KeyboardInterrupt:
        logger.info("Pipeline interrupted by operator")
        console.write_error("Interrupted.")
        sys.exit(130)

    logger.info("Pipeline execution completed")


if __name__ == "__main__":
    main()
