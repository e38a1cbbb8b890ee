"""
Pytest configuration and shared fixtures for podcastr tests.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from podcastr.config import PodcastrConfig
from podcastr.models import SocialMediaPosts
from podcastr.usage import UsageTracker


class FakeConsole:
    """Scripted stand-in for OperatorConsole that records what was shown."""

    def __init__(self, urls=None, texts=None, selections=None, confirmations=None):
        self.console = Mock()
        self.messages = []
        self.errors = []
        self.confirm_prompts = []
        self._urls = list(urls or [])
        self._texts = list(texts or [])
        self._selections = list(selections or [])
        self._confirmations = list(confirmations or [])

    def show_header(self):
        pass

    def ask_url(self, prompt, require_https=False):
        return self._urls.pop(0) if self._urls else "https://example.com"

    def ask_text(self, prompt, max_length=200):
        return self._texts.pop(0) if self._texts else "My Podcast"

    def select(self, options, prompt):
        return self._selections.pop(0) if self._selections else options[0]

    def confirm(self, prompt, default):
        self.confirm_prompts.append(prompt)
        return self._confirmations.pop(0)

    def write_message(self, message):
        self.messages.append(message)

    def write_error(self, message):
        self.errors.append(message)


def chat_response(content, prompt_tokens=0, completion_tokens=0):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(
        usage=SimpleNamespace(
            prompt_tokens=prompt_tokens, completion_tokens=completion_tokens
        ),
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
    )


@pytest.fixture
def fake_console_factory():
    return FakeConsole


@pytest.fixture
def make_chat_response():
    return chat_response


@pytest.fixture
def tracker():
    return UsageTracker()


@pytest.fixture
def config():
    return PodcastrConfig(
        endpoint="https://example.openai.azure.com",
        api_key="test-key",
        chat_model="gpt-4o",
        audio_model="tts-1",
        image_model="dall-e-3",
    )


@pytest.fixture
def mock_openai_client():
    """Mock AsyncAzureOpenAI client with async endpoints."""
    client = Mock()
    client.chat.completions.create = AsyncMock()
    client.audio.speech.create = AsyncMock()
    client.images.generate = AsyncMock()
    return client


@pytest.fixture
def sample_script():
    return "Hello world. Welcome to today's episode about web pages turned into podcasts."


@pytest.fixture
def sample_posts():
    return SocialMediaPosts(
        linkedin="New episode out now! 🎧",
        twitter="Tune in now! 🚀",
        facebook="Join the discussion! 💬",
    )


@pytest.fixture
def mock_generator(sample_script, sample_posts):
    """Content generator whose every call succeeds."""
    generator = Mock()
    generator.generate_script = AsyncMock(return_value=sample_script)
    generator.generate_description = AsyncMock(return_value="An episode description.")
    generator.generate_social_posts = AsyncMock(return_value=sample_posts)
    generator.generate_audio = AsyncMock(return_value=b"\xff\xfb\x90\x00" + b"\x00" * 100)
    generator.generate_image = AsyncMock(return_value=b"\x89PNG\r\n\x1a\n" + b"\x00" * 100)
    return generator
