"""
Configuration settings for the podcast generation pipeline.

This module defines the PodcastrConfig dataclass holding the Azure OpenAI
connection settings, and the fixed choices offered to the operator.
Values come from the environment (or a .env file); anything left unset is
prompted for interactively by the CLI.
"""

import os
from dataclasses import dataclass, fields
from typing import List, Optional

from dotenv import load_dotenv


PODCAST_LANGUAGES = ["German", "English", "French", "Spanish"]

PODCAST_VOICES = ["Alloy", "Echo", "Fable", "Onyx", "Nova", "Shimmer"]

DEFAULT_API_VERSION = "2024-10-21"

# Environment variable backing each configuration field
ENV_VARS = {
    "endpoint": "AZURE_OPENAI_ENDPOINT",
    "api_key": "AZURE_OPENAI_API_KEY",
    "chat_model": "AZURE_OPENAI_CHAT_MODEL",
    "audio_model": "AZURE_OPENAI_AUDIO_MODEL",
    "image_model": "AZURE_OPENAI_IMAGE_MODEL",
}


@dataclass
class PodcastrConfig:
    """Configuration for the Azure OpenAI deployments used by the pipeline"""

    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    chat_model: Optional[str] = None
    audio_model: Optional[str] = None
    image_model: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION

    @classmethod
    def from_env(cls) -> "PodcastrConfig":
        """
        Build a configuration from environment variables.

        A .env file in the working directory is loaded first if present.

        Returns:
            PodcastrConfig with every value found in the environment
        """
        load_dotenv()
        values = {name: os.getenv(var) or None for name, var in ENV_VARS.items()}
        api_version = os.getenv("AZURE_OPENAI_API_VERSION") or DEFAULT_API_VERSION
        return cls(api_version=api_version, **values)

    def missing_fields(self) -> List[str]:
        """Names of the required fields that are still unset, in declaration order."""
        return [
            f.name
            for f in fields(self)
            if f.name in ENV_VARS and not getattr(self, f.name)
        ]

    def validate(self) -> List[str]:
        """
        Validate configuration and return any error messages.

        Returns:
            List of error messages (empty if configuration is usable)
        """
        errors = [
            f"{ENV_VARS[name]} is required" for name in self.missing_fields()
        ]
        if self.endpoint and not self.endpoint.startswith("https://"):
            errors.append("AZURE_OPENAI_ENDPOINT must be an https:// URL")
        return errors
