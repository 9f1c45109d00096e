"""Textual Message subclasses -- contracts between widgets and the App."""

from __future__ import annotations

from textual.message import Message

from audio_intelligence.l1_entities.audio_file import AudioFile


class FileAccepted(Message):
    """Posted by the upload panel once a file passes validation."""

    def __init__(self, audio_file: AudioFile) -> None:
        super().__init__()
        self.audio_file = audio_file


class ProcessingRequested(Message):
    """Posted by the file info card when Start Processing is pressed."""


class JumpToTime(Message):
    """Posted by a segment card to seek the simulated player."""

    def __init__(self, seconds: float) -> None:
        super().__init__()
        self.seconds = seconds


class SettingChanged(Message):
    """Posted by the settings sidebar for every control change."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__()
        self.name = name
        self.value = value


class TargetLanguageChanged(Message):
    """Posted by the translation panel when its target selector changes."""

    def __init__(self, code: str) -> None:
        super().__init__()
        self.code = code


class PlaybackChanged(Message):
    """Posted by the playback controls after any transport action."""
