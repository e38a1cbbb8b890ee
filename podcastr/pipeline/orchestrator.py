import asyncio
import logging
from typing import Awaitable, Callable, Dict, NamedTuple, Optional

from rich.console import Console

from podcastr.config import PODCAST_LANGUAGES, PODCAST_VOICES
from podcastr.ingestion import fetch_page_text
from podcastr.llm import PodcastContentGenerator
from podcastr.logger import log_function
from podcastr.models import PipelineRun
from podcastr.storage import LocalStorage, build_archive, build_manifest
from podcastr.usage import UsageCounters, UsageTracker, render_cost_report
from .console import OperatorConsole
from .results import GateDecision, PipelineState, StageResult
from .stages import execute_stage, validate_stage


logger = logging.getLogger("pipeline")


class DerivativeStage(NamedTuple):
    """A stage that only depends on the script."""

    attribute: str  # PipelineRun field receiving the value
    run_label: str
    check_label: str


# Validation order is the declaration order
DERIVATIVE_STAGES = [
    DerivativeStage(
        "description",
        "Generating podcast description",
        "Podcast description generation",
    ),
    DerivativeStage(
        "social_posts",
        "Generating social media posts",
        "Social media posts generation",
    ),
    DerivativeStage(
        "audio_bytes",
        "Generating podcast audio",
        "Podcast audio generation",
    ),
    DerivativeStage(
        "cover_image_bytes",
        "Generating podcast image",
        "Podcast image generation",
    ),
]


class PipelineOrchestrator:
    """
    Drives pipeline runs as a finite state machine.

    Each state has one handler returning the next state. A failed
    validation gate sends the machine back to AWAITING_INPUT when the
    operator asks for a restart and to TERMINATED otherwise, so a run
    either produces a complete archive or nothing.

    Args:
        generator: Content generator sharing `tracker`
        tracker: Usage tracker, reset at the start of each run
        console: Operator console
        fetch_content: Coroutine function returning the page text of a URL
        storage: Destination of the archive (defaults to the temp directory)
        report: Cost report renderer
    """

    def __init__(
        self,
        generator: PodcastContentGenerator,
        tracker: UsageTracker,
        console: OperatorConsole,
        fetch_content: Callable[[str], Awaitable[str]] = fetch_page_text,
        storage: Optional[LocalStorage] = None,
        report: Callable[[Console, UsageCounters, bool], None] = render_cost_report,
    ):
        self.generator = generator
        self.tracker = tracker
        self.console = console
        self.fetch_content = fetch_content
        self.storage = storage or LocalStorage()
        self.report = report

        self.current_run: Optional[PipelineRun] = None
        self.history: list[PipelineState] = []
        self._derivatives: Dict[str, StageResult] = {}
        self._handlers = {
            PipelineState.AWAITING_INPUT: self._await_input,
            PipelineState.FETCHING_CONTENT: self._fetch_content,
            PipelineState.GENERATING_SCRIPT: self._generate_script,
            PipelineState.GENERATING_DERIVATIVES: self._generate_derivatives,
            PipelineState.VALIDATING: self._validate_derivatives,
            PipelineState.BUILDING_ARCHIVE: self._build_archive,
            PipelineState.REPORTING: self._report,
            PipelineState.AWAITING_REPEAT_DECISION: self._await_repeat_decision,
        }

    @log_function(logger_name="pipeline", log_execution_time=True)
    async def run(self) -> None:
        """Loop over runs until the operator stops."""
        logger.info("=== PIPELINE STARTED ===")
        state = PipelineState.AWAITING_INPUT
        while state is not PipelineState.TERMINATED:
            if state is PipelineState.AWAITING_INPUT:
                # history covers the current run only
                self.history = []
            self.history.append(state)
            logger.info(f"Entering state {state.value}")
            state = await self._handlers[state]()

        self.history.append(PipelineState.TERMINATED)
        logger.info("=== PIPELINE TERMINATED ===")

    def _after_gate(self, decision: GateDecision, next_state: PipelineState) -> PipelineState:
        if decision.passed:
            return next_state

        logger.info(f"Run abandoned (restart requested: {decision.restart})")
        self.current_run = None
        self._derivatives = {}
        if decision.restart:
            return PipelineState.AWAITING_INPUT
        return PipelineState.TERMINATED

    async def _await_input(self) -> PipelineState:
        self.console.show_header()
        self.tracker.reset()

        content_url = self.console.ask_url(
            "Enter the [yellow]URL[/] of the content:"
        )
        podcast_name = self.console.ask_text(
            "Enter the [yellow]name[/] of the podcast:"
        )
        language = self.console.select(
            PODCAST_LANGUAGES, "Select the [yellow]language[/] of the podcast"
        )
        voice = self.console.select(
            PODCAST_VOICES, "Select the [yellow]voice[/] of the podcast"
        )

        self.current_run = PipelineRun(
            content_url=content_url,
            podcast_name=podcast_name,
            language=language,
            voice=voice,
        )
        logger.info(
            f"New run: url={content_url}, name={podcast_name}, "
            f"language={language}, voice={voice}"
        )
        self.console.show_header()
        return PipelineState.FETCHING_CONTENT

    async def _fetch_content(self) -> PipelineState:
        run = self.current_run
        result = await execute_stage(
            "Loading content",
            lambda: self.fetch_content(run.content_url),
            self.console,
        )
        decision = validate_stage(result, "Loading content", self.console)
        if decision.passed:
            run.source_text = result.value
        return self._after_gate(decision, PipelineState.GENERATING_SCRIPT)

    async def _generate_script(self) -> PipelineState:
        run = self.current_run
        result = await execute_stage(
            "Generating podcast script",
            lambda: self.generator.generate_script(
                run.source_text, run.podcast_name, run.language
            ),
            self.console,
        )
        decision = validate_stage(result, "Podcast script generation", self.console)
        if decision.passed:
            run.script = result.value
        return self._after_gate(decision, PipelineState.GENERATING_DERIVATIVES)

    async def _generate_derivatives(self) -> PipelineState:
        run = self.current_run
        operations = {
            "description": lambda: self.generator.generate_description(
                run.script, run.language
            ),
            "social_posts": lambda: self.generator.generate_social_posts(
                run.script, run.language
            ),
            "audio_bytes": lambda: self.generator.generate_audio(run.script, run.voice),
            "cover_image_bytes": lambda: self.generator.generate_image(run.script),
        }

        # All branches run to completion before any result is inspected
        results = await asyncio.gather(
            *(
                execute_stage(stage.run_label, operations[stage.attribute], self.console)
                for stage in DERIVATIVE_STAGES
            )
        )
        self._derivatives = {
            stage.attribute: result for stage, result in zip(DERIVATIVE_STAGES, results)
        }
        return PipelineState.VALIDATING

    async def _validate_derivatives(self) -> PipelineState:
        for stage in DERIVATIVE_STAGES:
            decision = validate_stage(
                self._derivatives[stage.attribute], stage.check_label, self.console
            )
            if not decision.passed:
                return self._after_gate(decision, PipelineState.BUILDING_ARCHIVE)

        run = self.current_run
        for stage in DERIVATIVE_STAGES:
            setattr(run, stage.attribute, self._derivatives[stage.attribute].value)
        self._derivatives = {}
        return PipelineState.BUILDING_ARCHIVE

    async def _build_archive(self) -> PipelineState:
        run = self.current_run
        manifest = build_manifest(run)
        result = await execute_stage(
            "Creating zip archive",
            lambda: asyncio.to_thread(build_archive, manifest),
            self.console,
        )
        decision = validate_stage(result, "Creating zip archive", self.console)
        if not decision.passed:
            return self._after_gate(decision, PipelineState.REPORTING)

        try:
            path = await asyncio.to_thread(self.storage.save_archive, result.value)
        except RuntimeError as e:
            logger.error(f"Could not write archive: {e}")
            path = ""
        decision = validate_stage(StageResult.of(path), "Saving zip archive", self.console)
        if decision.passed:
            run.archive_path = path
            self.console.write_message(f"Zip archive saved to {path}")
        return self._after_gate(decision, PipelineState.REPORTING)

    async def _report(self) -> PipelineState:
        self.report(
            self.console.console,
            self.tracker.snapshot(),
            self.current_run.image_generated,
        )
        return PipelineState.AWAITING_REPEAT_DECISION

    async def _await_repeat_decision(self) -> PipelineState:
        self.current_run = None
        repeat = self.console.confirm("Do you want to repeat the process?", False)
        if repeat:
            return PipelineState.AWAITING_INPUT
        return PipelineState.TERMINATED
