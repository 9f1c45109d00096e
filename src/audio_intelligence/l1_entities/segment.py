"""Segment entities -- timeline, transcript, and translation display records."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


def format_clock(seconds: float) -> str:
    """Format seconds as m:ss with floored seconds."""
    mins = int(seconds // 60)
    secs = int(seconds % 60)
    return f'{mins}:{secs:02d}'


def format_timeline_time(seconds: float) -> str:
    """Format seconds as m:ss.s for the timeline ruler."""
    mins = int(seconds // 60)
    secs = f'{seconds % 60:.1f}'
    return f'{mins}:{secs.zfill(4)}'


def format_duration(seconds: float) -> str:
    return f'{seconds:.1f}s'


def confidence_level(confidence: float) -> str:
    """Bucket a 0-1 confidence into high / medium / low."""
    if confidence > 0.9:
        return 'high'
    if confidence > 0.7:
        return 'medium'
    return 'low'


def format_confidence(confidence: float) -> str:
    return f'{round(confidence * 100)}%'


class SegmentType(enum.Enum):
    SPEECH = 'speech'
    SILENCE = 'silence'
    NOISE = 'noise'


class TimelineSegment(BaseModel):
    id: str
    start_time: float
    end_time: float
    speaker: str = ''
    language: str = ''
    type: SegmentType = SegmentType.SPEECH
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)


class WordTiming(BaseModel):
    text: str
    start_time: float
    end_time: float
    confidence: float = Field(ge=0.0, le=1.0)


class TranscriptSegment(BaseModel):
    """A recognized utterance attributed to one speaker."""

    id: str
    speaker: str
    start_time: float
    end_time: float
    text: str
    confidence: float = Field(ge=0.0, le=1.0)
    language: str
    words: list[WordTiming] = Field(default_factory=list)

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time


class TranslationSegment(BaseModel):
    """An utterance paired with its translation into the target language."""

    id: str
    speaker: str
    start_time: float
    end_time: float
    original_text: str
    original_language: str
    translated_text: str
    target_language: str
    confidence: float = Field(ge=0.0, le=1.0)
    translation_confidence: float = Field(ge=0.0, le=1.0)
    is_translating: bool = False

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    @property
    def needs_translation(self) -> bool:
        return self.original_language != self.target_language


class DemoSession(BaseModel):
    """Fixture bundle rendered by the results view."""

    timeline: list[TimelineSegment] = Field(default_factory=list)
    transcript: list[TranscriptSegment] = Field(default_factory=list)
    translations: list[TranslationSegment] = Field(default_factory=list)
