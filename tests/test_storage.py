"""
Tests for archive building and local archive output.
"""

import io
import os
import zipfile

from podcastr.models import ArchiveEntry, PipelineRun
from podcastr.storage import LocalStorage, build_archive, build_manifest


def read_archive(data: bytes) -> dict:
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        return {name: archive.read(name) for name in archive.namelist()}


class TestBuildArchive:
    """Tests for podcastr/storage/archive.py"""

    def test_every_entry_retrievable_by_name(self):
        audio = b"\xff\xfb\x90\x00" + bytes(range(256))
        image = b"\x89PNG\r\n\x1a\n" + bytes(range(255, -1, -1))
        entries = [
            ArchiveEntry("podcast-script.txt", text_content="Hello world"),
            ArchiveEntry("podcast-description.txt", text_content="Über dieses Thema 🎧"),
            ArchiveEntry("podcast-socialmediaposts-linkedin.txt", text_content="Post one"),
            ArchiveEntry("podcast-socialmediaposts-twitter.txt", text_content="Post two"),
            ArchiveEntry("podcast-audio.mp3", byte_content=audio),
            ArchiveEntry("podcast-image.png", byte_content=image),
        ]

        files = read_archive(build_archive(entries))

        assert list(files) == [entry.file_name for entry in entries]
        assert files["podcast-script.txt"] == b"Hello world"
        assert files["podcast-description.txt"].decode("utf-8") == "Über dieses Thema 🎧"
        assert files["podcast-audio.mp3"] == audio
        assert files["podcast-image.png"] == image

    def test_blank_file_name_is_skipped(self, caplog):
        entries = [
            ArchiveEntry("", text_content="lost"),
            ArchiveEntry("   ", byte_content=b"lost too"),
            ArchiveEntry(None, text_content="lost again"),
            ArchiveEntry("kept.txt", text_content="kept"),
        ]

        files = read_archive(build_archive(entries))

        assert files == {"kept.txt": b"kept"}
        assert "File name cannot be empty" in caplog.text

    def test_entry_without_content_is_skipped(self):
        entries = [
            ArchiveEntry("empty.txt", text_content="  "),
            ArchiveEntry("empty.bin", byte_content=b""),
            ArchiveEntry("none.bin"),
            ArchiveEntry("kept.bin", byte_content=b"\x00\x01"),
        ]

        files = read_archive(build_archive(entries))

        assert files == {"kept.bin": b"\x00\x01"}

    def test_text_takes_precedence_over_bytes(self):
        entries = [ArchiveEntry("both.txt", text_content="text", byte_content=b"bytes")]

        assert read_archive(build_archive(entries)) == {"both.txt": b"text"}

    def test_missing_manifest_yields_empty_bytes(self):
        assert build_archive(None) == b""

    def test_manifest_follows_run_artifacts(self, sample_posts):
        run = PipelineRun(
            content_url="https://example.com",
            podcast_name="My Podcast",
            language="English",
            voice="Alloy",
            script="Hello world",
            description="Description",
            social_posts=sample_posts,
            audio_bytes=b"mp3",
            cover_image_bytes=b"png",
        )

        manifest = build_manifest(run)
        files = read_archive(build_archive(manifest))

        assert [entry.file_name for entry in manifest] == [
            "podcast-script.txt",
            "podcast-description.txt",
            "podcast-socialmediaposts-linkedin.txt",
            "podcast-socialmediaposts-twitter.txt",
            "podcast-socialmediaposts-facebook.txt",
            "podcast-audio.mp3",
            "podcast-image.png",
        ]
        assert files["podcast-socialmediaposts-twitter.txt"].decode() == sample_posts.twitter
        assert files["podcast-audio.mp3"] == b"mp3"
        assert files["podcast-image.png"] == b"png"


class TestLocalStorage:
    """Tests for podcastr/storage/local.py"""

    def test_save_archive_writes_unique_zip(self, tmp_path):
        storage = LocalStorage(str(tmp_path))

        first = storage.save_archive(b"PK first")
        second = storage.save_archive(b"PK second")

        assert first != second
        assert first.endswith(".zip")
        assert os.path.dirname(first) == str(tmp_path)
        with open(first, "rb") as f:
            assert f.read() == b"PK first"

    def test_save_archive_without_data(self, tmp_path):
        storage = LocalStorage(str(tmp_path))

        assert storage.save_archive(b"") == ""
        assert storage.save_archive(None) == ""
        assert list(tmp_path.iterdir()) == []

    def test_defaults_to_temp_directory(self):
        import tempfile

        assert LocalStorage().workspace == tempfile.gettempdir()
