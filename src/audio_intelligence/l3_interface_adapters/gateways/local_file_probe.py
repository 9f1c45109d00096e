"""Gateway: local filesystem probe -- implements FileProbe port."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from audio_intelligence.l1_entities.audio_file import AudioFile


class LocalFileProbe:
    """Builds AudioFile metadata from stat() and the file name; contents are never opened."""

    def probe(self, path: Path) -> AudioFile:
        path = path.expanduser()
        if not path.is_file():
            raise FileNotFoundError(f'File not found: {path}')
        media_type, _ = mimetypes.guess_type(path.name)
        return AudioFile(
            name=path.name,
            size=path.stat().st_size,
            media_type=media_type or '',
            path=str(path),
        )
