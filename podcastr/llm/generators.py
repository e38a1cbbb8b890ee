"""
Generative AI calls producing the podcast artifacts.

Each method wraps one Azure OpenAI request and records billed usage on the
injected UsageTracker right after a successful call.

Failure conventions:
    - Text generators (script, description, social posts) raise GenerationError.
    - Binary generators (audio, image) log the error and return empty bytes.
"""

import base64
import binascii
import json
import logging
from typing import List

from openai import AsyncAzureOpenAI, OpenAIError

from podcastr.config import PodcastrConfig
from podcastr.logger import log_function
from podcastr.models import SocialMediaPosts
from podcastr.usage import UsageTracker
from .exceptions import GenerationError
from .prompts import (
    _cover_image_preparation_prompt,
    _podcast_description_prompt,
    _podcast_script_prompt,
    _social_media_posts_prompt,
)


logger = logging.getLogger("llm")

CHAT_TEMPERATURE = 0.7
SCRIPT_MAX_TOKENS = 4096
DERIVATIVE_MAX_TOKENS = 1000

# The speech endpoint accepts at most 4096 input characters per request
SPEECH_CHUNK_SIZE = 4000

IMAGE_SIZE = "1024x1024"
IMAGE_QUALITY = "standard"
IMAGE_STYLE = "vivid"


def split_for_speech(text: str, chunk_size: int = SPEECH_CHUNK_SIZE) -> List[str]:
    """
    Split text into chunks accepted by the speech endpoint.

    Chunks end on a sentence boundary when one exists in the second half
    of the chunk.

    Args:
        text: Text to speak
        chunk_size: Maximum characters per chunk

    Returns:
        List of chunks whose concatenation equals the input
    """
    chunks = []
    remaining = text
    while remaining:
        chunk = remaining[:chunk_size]
        if len(remaining) > chunk_size:
            last_period = chunk.rfind(". ")
            if last_period > chunk_size // 2:
                chunk = remaining[: last_period + 1]
        chunks.append(chunk)
        remaining = remaining[len(chunk):]
    return chunks


class PodcastContentGenerator:
    """
    Generates script, description, social posts, audio and cover image.

    Args:
        client: Async Azure OpenAI client
        config: Configuration holding the deployment names
        tracker: Usage tracker owned by the orchestrator
    """

    def __init__(
        self,
        client: AsyncAzureOpenAI,
        config: PodcastrConfig,
        tracker: UsageTracker,
    ):
        self.client = client
        self.chat_model = config.chat_model
        self.audio_model = config.audio_model
        self.image_model = config.image_model
        self.tracker = tracker

    async def _complete_chat(
        self, prompt: str, max_tokens: int, json_mode: bool = False
    ) -> str:
        """Send a single system message and return the reply text ("" if none)."""
        extra = {"response_format": {"type": "json_object"}} if json_mode else {}
        response = await self.client.chat.completions.create(
            model=self.chat_model,
            messages=[{"role": "system", "content": prompt}],
            max_tokens=max_tokens,
            temperature=CHAT_TEMPERATURE,
            **extra,
        )

        if response.usage is not None:
            self.tracker.add_chat_input_tokens(response.usage.prompt_tokens)
            self.tracker.add_chat_output_tokens(response.usage.completion_tokens)

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    @log_function(logger_name="llm", log_execution_time=True)
    async def generate_script(
        self, source_text: str, podcast_name: str, language: str
    ) -> str:
        """
        Generate the podcast script from the page content.

        Args:
            source_text: Cleaned page text
            podcast_name: Title of the podcast episode
            language: Target language

        Returns:
            Script text (empty if the model returned nothing)

        Raises:
            GenerationError: If the chat request fails
        """
        try:
            return await self._complete_chat(
                _podcast_script_prompt(podcast_name, language, source_text),
                SCRIPT_MAX_TOKENS,
            )
        except OpenAIError as e:
            raise GenerationError(f"Error retrieving podcast script: {e}") from e

    @log_function(logger_name="llm", log_execution_time=True)
    async def generate_description(self, script: str, language: str) -> str:
        """
        Generate a podcast directory description from the script.

        Raises:
            GenerationError: If the chat request fails
        """
        try:
            return await self._complete_chat(
                _podcast_description_prompt(language, script),
                DERIVATIVE_MAX_TOKENS,
            )
        except OpenAIError as e:
            raise GenerationError(f"Error retrieving podcast description: {e}") from e

    @log_function(logger_name="llm", log_execution_time=True)
    async def generate_social_posts(
        self, script: str, language: str
    ) -> SocialMediaPosts:
        """
        Generate LinkedIn, Twitter and Facebook posts from the script.

        Returns:
            SocialMediaPosts parsed from the model's JSON answer

        Raises:
            GenerationError: If the request fails or the answer is not a JSON object
        """
        try:
            raw = await self._complete_chat(
                _social_media_posts_prompt(language, script),
                DERIVATIVE_MAX_TOKENS,
                json_mode=True,
            )
        except OpenAIError as e:
            raise GenerationError(
                f"Error retrieving podcast social media posts: {e}"
            ) from e

        if not raw:
            return SocialMediaPosts()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise GenerationError(f"Invalid social media posts JSON: {e}") from e
        if not isinstance(data, dict):
            raise GenerationError("Social media posts answer is not a JSON object")

        return SocialMediaPosts(
            linkedin=str(data.get("linkedin") or ""),
            twitter=str(data.get("twitter") or ""),
            facebook=str(data.get("facebook") or ""),
        )

    @log_function(logger_name="llm", log_execution_time=True)
    async def generate_audio(self, script: str, voice: str) -> bytes:
        """
        Speak the script with the selected voice.

        Long scripts are sent in several requests and the MP3 parts joined.

        Args:
            script: Podcast script
            voice: Voice name (e.g. "Alloy")

        Returns:
            MP3 audio, or empty bytes if generation failed
        """
        parts = []
        try:
            for chunk in split_for_speech(script or ""):
                response = await self.client.audio.speech.create(
                    model=self.audio_model,
                    voice=voice.lower(),
                    input=chunk,
                    response_format="mp3",
                )
                parts.append(response.content)
                self.tracker.add_audio_characters(len(chunk))
        except OpenAIError as e:
            logger.error(f"Error generating podcast audio: {e}")
            return b""

        audio = b"".join(parts)
        logger.info(f"Audio generated: {len(audio)} bytes")
        return audio

    @log_function(logger_name="llm", log_execution_time=True)
    async def generate_image(self, script: str) -> bytes:
        """
        Generate a cover image for the episode.

        A chat request first turns the script into a neutral image
        description, which is then sent to the image deployment.

        Returns:
            PNG image, or empty bytes if generation failed
        """
        try:
            image_prompt = await self._complete_chat(
                _cover_image_preparation_prompt(script),
                DERIVATIVE_MAX_TOKENS,
            )
            if not image_prompt:
                logger.error("Error generating podcast cover: empty image description")
                return b""

            result = await self.client.images.generate(
                model=self.image_model,
                prompt=image_prompt,
                size=IMAGE_SIZE,
                quality=IMAGE_QUALITY,
                style=IMAGE_STYLE,
                response_format="b64_json",
                n=1,
            )
            if not result.data or not result.data[0].b64_json:
                logger.error("Error generating podcast cover: no image data returned")
                return b""

            image = base64.b64decode(result.data[0].b64_json)
        except (OpenAIError, binascii.Error) as e:
            logger.error(f"Error generating podcast cover: {e}")
            return b""

        logger.info(f"Cover image generated: {len(image)} bytes")
        return image
