import logging

from openai import AsyncAzureOpenAI

from podcastr.config import PodcastrConfig


logger = logging.getLogger("llm")


def init_llm_openai(config: PodcastrConfig) -> AsyncAzureOpenAI:
    """
    Initialize the async Azure OpenAI client.

    One client serves chat, speech and image calls; the deployment is
    chosen per request.

    Args:
        config: Complete pipeline configuration

    Returns:
        AsyncAzureOpenAI client instance

    Raises:
        ValueError: If the configuration is incomplete or invalid
    """
    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid Azure OpenAI configuration: {'; '.join(errors)}")

    client = AsyncAzureOpenAI(
        azure_endpoint=config.endpoint,
        api_key=config.api_key,
        api_version=config.api_version,
    )
    logger.info(f"Azure OpenAI client initialized for {config.endpoint}")
    return client
