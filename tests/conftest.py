"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from audio_intelligence.l1_entities.audio_file import AudioFile
from audio_intelligence.l1_entities.config import AppConfig
from audio_intelligence.l1_entities.segment import (
    DemoSession,
    SegmentType,
    TimelineSegment,
    TranscriptSegment,
    TranslationSegment,
)
from audio_intelligence.l3_interface_adapters.controllers.session_controller import SessionController
from audio_intelligence.l4_frameworks_and_drivers.config import build_app_config

MB = 1024 * 1024

# --- Protocol-conforming Fakes ---


class FakeSessionSource:
    """Fake SessionSource returning a fixed DemoSession."""

    def __init__(self, session: DemoSession | None = None) -> None:
        self._session = session if session is not None else make_session()
        self.load_calls = 0

    def load(self) -> DemoSession:
        self.load_calls += 1
        return self._session


class FakeFileProbe:
    """Fake FileProbe: known names map to AudioFiles, anything else is missing."""

    def __init__(self, files: dict[str, AudioFile] | None = None) -> None:
        self._files = dict(files or {})
        self.probed: list[Path] = []

    def add(self, file: AudioFile) -> None:
        self._files[file.name] = file

    def probe(self, path: Path) -> AudioFile:
        self.probed.append(path)
        if path.name not in self._files:
            raise FileNotFoundError(f'File not found: {path}')
        return self._files[path.name]


# --- Builders ---


def make_transcript() -> list[TranscriptSegment]:
    return [
        TranscriptSegment(
            id='1',
            speaker='Speaker 1',
            start_time=0.0,
            end_time=5.2,
            text='Welcome to the quarterly review.',
            confidence=0.95,
            language='en',
        ),
        TranscriptSegment(
            id='2',
            speaker='Speaker 2',
            start_time=5.8,
            end_time=12.1,
            text='Gracias por la introducción.',
            confidence=0.87,
            language='es',
        ),
        TranscriptSegment(
            id='3',
            speaker='Speaker 1',
            start_time=72.5,
            end_time=78.3,
            text='That is excellent news!',
            confidence=0.62,
            language='en',
        ),
    ]


def make_translations() -> list[TranslationSegment]:
    return [
        TranslationSegment(
            id='1',
            speaker='Speaker 1',
            start_time=0.0,
            end_time=5.2,
            original_text='Welcome to the quarterly review.',
            original_language='en',
            translated_text='Welcome to the quarterly review.',
            target_language='en',
            confidence=0.95,
            translation_confidence=1.0,
        ),
        TranslationSegment(
            id='2',
            speaker='Speaker 2',
            start_time=5.8,
            end_time=12.1,
            original_text='Gracias por la introducción.',
            original_language='es',
            translated_text='Thank you for the introduction.',
            target_language='en',
            confidence=0.87,
            translation_confidence=0.92,
        ),
        TranslationSegment(
            id='3',
            speaker='Speaker 3',
            start_time=18.3,
            end_time=25.7,
            original_text='Bien sûr.',
            original_language='fr',
            translated_text='Of course.',
            target_language='en',
            confidence=0.78,
            translation_confidence=0.89,
            is_translating=True,
        ),
    ]


def make_timeline() -> list[TimelineSegment]:
    return [
        TimelineSegment(id='1', start_time=0.0, end_time=5.0, speaker='Speaker 1', language='en', confidence=0.95),
        TimelineSegment(id='2', start_time=5.0, end_time=6.0, type=SegmentType.SILENCE),
        TimelineSegment(id='3', start_time=6.0, end_time=10.0, speaker='Speaker 2', language='es', confidence=0.87),
    ]


def make_session() -> DemoSession:
    return DemoSession(timeline=make_timeline(), transcript=make_transcript(), translations=make_translations())


def make_controller(
    config: AppConfig | None = None,
    files: list[AudioFile] | None = None,
) -> SessionController:
    probe = FakeFileProbe({f.name: f for f in files or []})
    return SessionController(
        config=config or build_app_config({}),
        session_source=FakeSessionSource(),
        file_probe=probe,
    )


# --- Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def demo_session() -> DemoSession:
    return make_session()


@pytest.fixture
def good_file() -> AudioFile:
    return AudioFile(name='meeting.mp3', size=5 * MB, media_type='audio/mpeg', path='/tmp/meeting.mp3')


@pytest.fixture
def controller(good_file) -> SessionController:
    return make_controller(files=[good_file])
