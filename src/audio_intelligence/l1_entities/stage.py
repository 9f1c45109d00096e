"""Processing stage entity -- one step of the simulated pipeline."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class StageStatus(enum.Enum):
    PENDING = 'pending'
    PROCESSING = 'processing'
    COMPLETED = 'completed'
    ERROR = 'error'


class ProcessingStage(BaseModel):
    """A named stage shown in the status indicators."""

    id: str
    name: str
    status: StageStatus = StageStatus.PENDING
    progress: int = Field(default=0, ge=0, le=100)
    icon: str = ''


# (id, display name, icon) in pipeline order
STAGE_DEFINITIONS: list[tuple[str, str, str]] = [
    ('upload', 'File Upload', '⇪'),
    ('speaker-id', 'Speaker Identification', '☺'),
    ('diarization', 'Speaker Diarization', '☷'),
    ('language-id', 'Language Identification', '⌘'),
    ('asr', 'Speech Recognition', '♪'),
    ('translation', 'Translation', '⇄'),
]
