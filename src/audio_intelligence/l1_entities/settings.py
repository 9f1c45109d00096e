"""Audio settings sidebar model -- local UI state with validated choices."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from audio_intelligence.l1_entities.language import LANGUAGES

SAMPLE_RATES: list[int] = [16000, 22050, 44100, 48000, 96000]
BIT_DEPTHS: list[int] = [16, 24, 32]
MIN_SPEAKER_DURATIONS: list[float] = [0.5, 1.0, 2.0, 5.0]
EXPORT_FORMATS: dict[str, str] = {
    'json': 'JSON',
    'txt': 'Plain Text',
    'srt': 'SRT Subtitles',
    'vtt': 'WebVTT',
    'csv': 'CSV',
}


class AudioSettings(BaseModel):
    sample_rate: Literal[16000, 22050, 44100, 48000, 96000] = 44100
    bit_depth: Literal[16, 24, 32] = 16
    noise_reduction: bool = True
    echo_cancellation: bool = False
    noise_gate_db: int = Field(default=-40, ge=-80, le=0)
    speaker_verification: bool = True
    min_speaker_duration: float = 2.0
    similarity_threshold: int = Field(default=75, ge=50, le=100, multiple_of=5)
    target_language: str = 'auto'
    auto_translate: bool = True
    include_timestamps: bool = True
    confidence_scores: bool = False
    export_format: Literal['json', 'txt', 'srt', 'vtt', 'csv'] = 'json'

    model_config = {'validate_assignment': True}

    @field_validator('target_language')
    @classmethod
    def _known_language(cls, value: str) -> str:
        if value != 'auto' and value not in LANGUAGES:
            raise ValueError(f'Unknown target language: {value!r}')
        return value

    @field_validator('min_speaker_duration')
    @classmethod
    def _known_duration(cls, value: float) -> float:
        if value not in MIN_SPEAKER_DURATIONS:
            raise ValueError(f'Minimum speaker duration must be one of {MIN_SPEAKER_DURATIONS}')
        return value
