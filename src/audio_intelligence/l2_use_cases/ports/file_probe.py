"""Port: turn a user-supplied path into AudioFile metadata."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from audio_intelligence.l1_entities.audio_file import AudioFile


class FileProbe(Protocol):
    """Reads name, size, and media type without touching file contents."""

    def probe(self, path: Path) -> AudioFile:
        """Raises FileNotFoundError when *path* is missing or not a regular file."""
        ...
