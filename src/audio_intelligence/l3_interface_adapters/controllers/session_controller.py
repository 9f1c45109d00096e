"""SessionController -- owns the mockup's UI state and delegates to use cases."""

from __future__ import annotations

import logging
from pathlib import Path

from audio_intelligence.l1_entities.audio_file import AudioFile
from audio_intelligence.l1_entities.config import AppConfig
from audio_intelligence.l1_entities.segment import DemoSession
from audio_intelligence.l1_entities.settings import AudioSettings
from audio_intelligence.l1_entities.stage import ProcessingStage
from audio_intelligence.l2_use_cases.export_use_case import export_transcript, export_translations
from audio_intelligence.l2_use_cases.playback_use_case import PlaybackUseCase, initial_playback_state
from audio_intelligence.l2_use_cases.ports.file_probe import FileProbe
from audio_intelligence.l2_use_cases.ports.session_source import SessionSource
from audio_intelligence.l2_use_cases.stage_use_case import ACTIVE_STAGE_ID, StageSummary, build_stages, summarize_stages
from audio_intelligence.l2_use_cases.upload_use_case import ValidateUploadUseCase

log = logging.getLogger('audint.controller')


class SessionController:
    """Central state holder bridging use cases to the TUI.

    Owns the uploaded file, the fake processing flags, playback state, and
    sidebar settings. Nothing here performs real work; stage transitions are
    driven by the App's timer and buttons.
    """

    def __init__(
        self,
        config: AppConfig,
        session_source: SessionSource,
        file_probe: FileProbe,
    ) -> None:
        self._config = config
        self._probe = file_probe
        self._upload_uc = ValidateUploadUseCase(config.upload)

        self.session: DemoSession = session_source.load()
        self.settings: AudioSettings = config.settings.model_copy()
        self.playback = PlaybackUseCase(
            initial_playback_state(config.playback),
            skip_seconds=config.playback.skip_seconds,
            speeds=config.playback.speeds,
        )
        self.uploaded_file: AudioFile | None = None
        self.is_processing = False
        self.current_stage = 'upload'
        self.target_language = 'en'

    @property
    def accepted_formats(self) -> list[str]:
        return self._upload_uc.accepted_formats

    @property
    def max_upload_bytes(self) -> int:
        return self._upload_uc.max_bytes

    def select_path(self, path: Path) -> AudioFile:
        """Probe and validate *path*. Raises FileNotFoundError or UploadValidationError."""
        return self._upload_uc.execute(self._probe.probe(path))

    def accept_upload(self, file: AudioFile) -> None:
        self.uploaded_file = file
        log.debug('Upload stage complete for %s', file.name)

    def start_processing(self) -> None:
        """Flip into the simulated processing state; idempotent."""
        if self.is_processing:
            return
        self.is_processing = True
        self.current_stage = ACTIVE_STAGE_ID
        log.debug('Simulated processing started at stage %s', self.current_stage)

    def stages(self) -> list[ProcessingStage]:
        return build_stages(
            uploaded=self.uploaded_file is not None,
            is_processing=self.is_processing,
            current_stage=self.current_stage,
            active_progress=self._config.processing.active_progress,
        )

    def summary(self) -> StageSummary:
        return summarize_stages(self.stages())

    def update_setting(self, name: str, value: object) -> None:
        """Assign one sidebar setting; pydantic validates the value."""
        setattr(self.settings, name, value)
        log.debug('Setting %s = %r', name, value)

    def set_target_language(self, code: str) -> None:
        self.target_language = code
        log.debug('Translation target language = %s', code)

    def export_transcript(self) -> str:
        return export_transcript(
            self.session.transcript,
            self.settings.export_format,
            include_timestamps=self.settings.include_timestamps,
        )

    def export_translations(self) -> str:
        return export_translations(
            self.session.translations,
            self.settings.export_format,
            include_timestamps=self.settings.include_timestamps,
        )
