"""
Data models shared across the podcast generation pipeline.

Models:
    SocialMediaPosts: Platform-specific promotional posts for an episode
    PipelineRun: Inputs and accumulated artifacts of one pipeline run
    ArchiveEntry: One named file of the episode archive manifest
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SocialMediaPosts:
    """Social media posts generated from a podcast script."""

    linkedin: str = ""
    twitter: str = ""
    facebook: str = ""

    def __bool__(self) -> bool:
        # Usable only when every platform received text
        return all(
            post and post.strip()
            for post in (self.linkedin, self.twitter, self.facebook)
        )


@dataclass
class PipelineRun:
    """
    State of a single pipeline run.

    Created when the operator has answered the input prompts and filled in
    stage by stage. Discarded when the run ends, whatever the outcome.
    """

    content_url: str
    podcast_name: str
    language: str
    voice: str

    source_text: Optional[str] = None
    script: Optional[str] = None
    description: Optional[str] = None
    social_posts: Optional[SocialMediaPosts] = None
    audio_bytes: Optional[bytes] = None
    cover_image_bytes: Optional[bytes] = None
    archive_path: Optional[str] = None

    @property
    def image_generated(self) -> bool:
        return bool(self.cover_image_bytes)


@dataclass
class ArchiveEntry:
    """A file to place in the episode archive, holding either text or bytes."""

    file_name: Optional[str]
    text_content: Optional[str] = None
    byte_content: Optional[bytes] = None
