"""Configuration Pydantic models -- pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field

from audio_intelligence.l1_entities.playback import PLAYBACK_SPEEDS
from audio_intelligence.l1_entities.settings import AudioSettings


class UploadConfig(BaseModel):
    accepted_formats: list[str]
    max_size_mb: int = Field(gt=0)

    @property
    def max_size_bytes(self) -> int:
        return self.max_size_mb * 1024 * 1024


class ProcessingConfig(BaseModel):
    start_delay: float = Field(ge=0.0)
    active_progress: int = Field(ge=0, le=100)


class PlaybackConfig(BaseModel):
    total_time: float = Field(gt=0.0)
    initial_position: float = Field(ge=0.0)
    initial_volume: int = Field(ge=0, le=100)
    skip_seconds: float = Field(gt=0.0)
    speeds: list[float] = Field(default_factory=lambda: list(PLAYBACK_SPEEDS))


class UiConfig(BaseModel):
    show_settings: bool
    theme: str


class AppConfig(BaseModel):
    upload: UploadConfig
    processing: ProcessingConfig
    playback: PlaybackConfig
    ui: UiConfig
    settings: AudioSettings = Field(default_factory=AudioSettings)
