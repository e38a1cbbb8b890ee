"""
Episode archive building.

Packs the manifest of generated artifacts into a single in-memory ZIP file.
"""

import io
import logging
import zipfile
from typing import Iterable, List, Optional

from podcastr.logger import log_function
from podcastr.models import ArchiveEntry, PipelineRun


logger = logging.getLogger("storage")


SCRIPT_FILE = "podcast-script.txt"
DESCRIPTION_FILE = "podcast-description.txt"
LINKEDIN_FILE = "podcast-socialmediaposts-linkedin.txt"
TWITTER_FILE = "podcast-socialmediaposts-twitter.txt"
FACEBOOK_FILE = "podcast-socialmediaposts-facebook.txt"
AUDIO_FILE = "podcast-audio.mp3"
IMAGE_FILE = "podcast-image.png"


def build_manifest(run: PipelineRun) -> List[ArchiveEntry]:
    """
    List the archive entries for a completed run.

    Args:
        run: Pipeline run whose artifacts passed validation

    Returns:
        Ordered list of archive entries (text files first, then audio and image)
    """
    posts = run.social_posts
    return [
        ArchiveEntry(SCRIPT_FILE, text_content=run.script),
        ArchiveEntry(DESCRIPTION_FILE, text_content=run.description),
        ArchiveEntry(LINKEDIN_FILE, text_content=posts.linkedin if posts else None),
        ArchiveEntry(TWITTER_FILE, text_content=posts.twitter if posts else None),
        ArchiveEntry(FACEBOOK_FILE, text_content=posts.facebook if posts else None),
        ArchiveEntry(AUDIO_FILE, byte_content=run.audio_bytes),
        ArchiveEntry(IMAGE_FILE, byte_content=run.cover_image_bytes),
    ]


@log_function(logger_name="storage", log_execution_time=True)
def build_archive(entries: Optional[Iterable[ArchiveEntry]]) -> bytes:
    """
    Create a ZIP archive from the given entries.

    Entries without a file name are skipped with a warning. Entries with
    neither text nor bytes are skipped silently. Text wins over bytes when
    both are set.

    Args:
        entries: Archive manifest

    Returns:
        ZIP file content, or empty bytes when no manifest was given
    """
    if entries is None:
        logger.error("Archive entries cannot be None.")
        return b""

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for entry in entries:
            if not entry.file_name or not entry.file_name.strip():
                logger.warning("File name cannot be empty in an archive entry.")
                continue

            if entry.text_content and entry.text_content.strip():
                archive.writestr(entry.file_name, entry.text_content.encode("utf-8"))
            elif entry.byte_content:
                archive.writestr(entry.file_name, entry.byte_content)

    return buffer.getvalue()
