"""
Tests for the Azure OpenAI content generators.
"""

import base64
import json
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from podcastr.llm import GenerationError, PodcastContentGenerator, split_for_speech
from podcastr.models import SocialMediaPosts


@pytest.fixture
def generator(mock_openai_client, config, tracker):
    return PodcastContentGenerator(mock_openai_client, config, tracker)


class TestTextGeneration:
    @pytest.mark.asyncio
    async def test_script_tracks_tokens(
        self, generator, mock_openai_client, make_chat_response, tracker
    ):
        mock_openai_client.chat.completions.create.return_value = make_chat_response(
            "Welcome to the show.", prompt_tokens=1000, completion_tokens=500
        )

        script = await generator.generate_script("Page text", "River Talk", "English")

        assert script == "Welcome to the show."
        assert tracker.get_chat_input_tokens() == 1000
        assert tracker.get_chat_output_tokens() == 500
        kwargs = mock_openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["messages"][0]["role"] == "system"
        assert "River Talk" in kwargs["messages"][0]["content"]
        assert "Page text" in kwargs["messages"][0]["content"]

    @pytest.mark.asyncio
    async def test_missing_content_returns_empty_text(
        self, generator, mock_openai_client, make_chat_response
    ):
        mock_openai_client.chat.completions.create.return_value = make_chat_response(None)

        assert await generator.generate_description("Script", "French") == ""

    @pytest.mark.asyncio
    async def test_service_error_becomes_generation_error(
        self, generator, mock_openai_client, tracker
    ):
        cause = OpenAIError("service unavailable")
        mock_openai_client.chat.completions.create.side_effect = cause

        with pytest.raises(GenerationError) as exc_info:
            await generator.generate_script("Page text", "River Talk", "English")

        assert exc_info.value.__cause__ is cause
        assert tracker.get_chat_input_tokens() == 0

    @pytest.mark.asyncio
    async def test_social_posts_parsed_from_json(
        self, generator, mock_openai_client, make_chat_response
    ):
        answer = {"linkedin": "Pro post", "twitter": "Short post", "facebook": "Friendly post"}
        mock_openai_client.chat.completions.create.return_value = make_chat_response(
            json.dumps(answer), prompt_tokens=10, completion_tokens=20
        )

        posts = await generator.generate_social_posts("Script", "Spanish")

        assert posts == SocialMediaPosts("Pro post", "Short post", "Friendly post")
        kwargs = mock_openai_client.chat.completions.create.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}

    @pytest.mark.asyncio
    async def test_social_posts_invalid_json(
        self, generator, mock_openai_client, make_chat_response
    ):
        mock_openai_client.chat.completions.create.return_value = make_chat_response(
            "not json at all"
        )

        with pytest.raises(GenerationError):
            await generator.generate_social_posts("Script", "English")

    @pytest.mark.asyncio
    async def test_social_posts_empty_answer(
        self, generator, mock_openai_client, make_chat_response
    ):
        mock_openai_client.chat.completions.create.return_value = make_chat_response("")

        posts = await generator.generate_social_posts("Script", "English")

        assert not posts


class TestAudioGeneration:
    @pytest.mark.asyncio
    async def test_voice_and_characters(self, generator, mock_openai_client, tracker):
        mock_openai_client.audio.speech.create.return_value = SimpleNamespace(content=b"mp3")

        audio = await generator.generate_audio("Hello listeners", "Alloy")

        assert audio == b"mp3"
        assert tracker.get_audio_characters() == len("Hello listeners")
        kwargs = mock_openai_client.audio.speech.create.call_args.kwargs
        assert kwargs["voice"] == "alloy"
        assert kwargs["model"] == "tts-1"
        assert kwargs["input"] == "Hello listeners"

    @pytest.mark.asyncio
    async def test_long_script_is_chunked(self, generator, mock_openai_client, tracker):
        mock_openai_client.audio.speech.create.return_value = SimpleNamespace(content=b"mp3")

        audio = await generator.generate_audio("x" * 9000, "Echo")

        assert mock_openai_client.audio.speech.create.await_count == 3
        assert audio == b"mp3" * 3
        assert tracker.get_audio_characters() == 9000

    @pytest.mark.asyncio
    async def test_error_returns_empty_bytes(self, generator, mock_openai_client, tracker):
        mock_openai_client.audio.speech.create.side_effect = OpenAIError("bad voice")

        assert await generator.generate_audio("Hello listeners", "Onyx") == b""
        assert tracker.get_audio_characters() == 0


class TestImageGeneration:
    @pytest.mark.asyncio
    async def test_image_decoded(
        self, generator, mock_openai_client, make_chat_response, tracker
    ):
        png = b"\x89PNG\r\n\x1a\n" + b"\x01" * 20
        mock_openai_client.chat.completions.create.return_value = make_chat_response(
            "A calm river at dawn", prompt_tokens=100, completion_tokens=30
        )
        mock_openai_client.images.generate.return_value = SimpleNamespace(
            data=[SimpleNamespace(b64_json=base64.b64encode(png).decode())]
        )

        image = await generator.generate_image("Script")

        assert image == png
        assert tracker.get_chat_input_tokens() == 100
        kwargs = mock_openai_client.images.generate.call_args.kwargs
        assert kwargs["prompt"] == "A calm river at dawn"
        assert kwargs["model"] == "dall-e-3"
        assert kwargs["size"] == "1024x1024"

    @pytest.mark.asyncio
    async def test_empty_image_description_skips_image_call(
        self, generator, mock_openai_client, make_chat_response
    ):
        mock_openai_client.chat.completions.create.return_value = make_chat_response("")

        assert await generator.generate_image("Script") == b""
        mock_openai_client.images.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_error_returns_empty_bytes(
        self, generator, mock_openai_client, make_chat_response
    ):
        mock_openai_client.chat.completions.create.return_value = make_chat_response("A river")
        mock_openai_client.images.generate.side_effect = OpenAIError("content policy")

        assert await generator.generate_image("Script") == b""


class TestSplitForSpeech:
    def test_short_text_is_one_chunk(self):
        assert split_for_speech("Hello.") == ["Hello."]

    def test_empty_text(self):
        assert split_for_speech("") == []

    def test_splits_on_sentence_boundary(self):
        text = "a" * 3000 + ". " + "b" * 3000

        chunks = split_for_speech(text)

        assert chunks[0] == "a" * 3000 + "."
        assert all(len(chunk) <= 4000 for chunk in chunks)
        assert "".join(chunks) == text
