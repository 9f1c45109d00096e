"""Playback state entity -- a simulated transport with no audio behind it."""

from __future__ import annotations

from pydantic import BaseModel, Field

PLAYBACK_SPEEDS: list[float] = [0.5, 0.75, 1.0, 1.25, 1.5, 2.0]


class PlaybackState(BaseModel):
    """Mutable transport state owned by the session controller."""

    is_playing: bool = False
    is_muted: bool = False
    volume: int = Field(default=75, ge=0, le=100)
    position: float = Field(default=65.0, ge=0.0, description='Simulated clock in seconds')
    total_time: float = Field(default=300.0, gt=0.0)
    speed: float = 1.0

    @property
    def progress_percent(self) -> float:
        return self.position / self.total_time * 100

    @property
    def effective_volume(self) -> int:
        return 0 if self.is_muted else self.volume
