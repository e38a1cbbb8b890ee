"""
Storage module for episode output.

build_archive packs the generated artifacts into one ZIP file and
LocalStorage writes it to the filesystem.
"""

from .archive import build_archive, build_manifest
from .local import LocalStorage

__all__ = [
    "build_archive",
    "build_manifest",
    "LocalStorage",
]
