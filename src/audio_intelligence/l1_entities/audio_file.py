"""Uploaded audio file entity -- metadata only, contents are never read."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AudioFile(BaseModel):
    name: str
    size: int = Field(ge=0, description='Size in bytes')
    media_type: str = ''
    path: str | None = None

    @property
    def extension(self) -> str:
        """Lower-cased text after the last dot, with a leading dot."""
        return '.' + self.name.rsplit('.', 1)[-1].lower()

    @property
    def size_mb(self) -> float:
        return self.size / 1024 / 1024

    @property
    def type_label(self) -> str:
        if '/' in self.media_type:
            return self.media_type.split('/', 1)[1].upper()
        return self.extension.lstrip('.').upper()
