"""AudioIntelligenceApp -- TUI shell: header, settings sidebar, upload and results views."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError
from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.timer import Timer
from textual.widgets import Button, ContentSwitcher, Footer, Static

from audio_intelligence.l1_entities.audio_file import AudioFile
from audio_intelligence.l1_entities.config import AppConfig
from audio_intelligence.l3_interface_adapters.controllers.session_controller import SessionController
from audio_intelligence.l4_frameworks_and_drivers.logging_setup import setup_file_logging
from audio_intelligence.l4_frameworks_and_drivers.messages import (
    FileAccepted,
    JumpToTime,
    PlaybackChanged,
    ProcessingRequested,
    SettingChanged,
    TargetLanguageChanged,
)
from audio_intelligence.l4_frameworks_and_drivers.widgets.file_info import FileInfo
from audio_intelligence.l4_frameworks_and_drivers.widgets.help_modal import HelpModal
from audio_intelligence.l4_frameworks_and_drivers.widgets.playback_controls import PlaybackControls
from audio_intelligence.l4_frameworks_and_drivers.widgets.processing_timeline import ProcessingTimeline
from audio_intelligence.l4_frameworks_and_drivers.widgets.settings_sidebar import SettingsSidebar
from audio_intelligence.l4_frameworks_and_drivers.widgets.status_indicators import StatusIndicators
from audio_intelligence.l4_frameworks_and_drivers.widgets.transcript_panel import TranscriptPanel
from audio_intelligence.l4_frameworks_and_drivers.widgets.translation_panel import TranslationPanel
from audio_intelligence.l4_frameworks_and_drivers.widgets.upload_panel import UploadPanel

log = logging.getLogger('audint.app')

LIGHT_THEME = 'textual-light'
TICK_SECONDS = 1.0


class AudioIntelligenceApp(TextualApp):
    """Mockup front end for an audio analysis pipeline. Every result is fixture data."""

    CSS_PATH = 'app.tcss'
    TITLE = 'Audio Intelligence'

    BINDINGS = [
        Binding('t', 'toggle_theme', 'Theme'),
        Binding('s', 'toggle_settings', 'Settings'),
        Binding('space', 'toggle_playback', 'Play/Pause'),
        Binding('h', 'show_help', 'Help'),
        Binding('q', 'quit_app', 'Quit'),
    ]

    def __init__(
        self,
        config: AppConfig,
        controller: SessionController | None = None,
        initial_file: AudioFile | None = None,
        log_dir: Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config
        if log_dir is not None:
            setup_file_logging(log_dir)

        if controller is not None:
            self._controller = controller
        else:  # pragma: no cover -- composition-root wiring; controller always injected in tests
            from audio_intelligence.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: only wired when no controller injected (non-test path)
                DependencyContainer,
            )

            self._controller = DependencyContainer(config).controller

        self._initial_file = initial_file
        self._dark_theme = config.ui.theme if config.ui.theme != LIGHT_THEME else 'textual-dark'
        self._processing_timer: Timer | None = None

    @property
    def controller(self) -> SessionController:
        return self._controller

    def compose(self) -> ComposeResult:
        ctrl = self._controller
        with Horizontal(id='header'):
            yield Static('◉ Audio Intelligence', id='app-title')
            yield Static('Beta', id='beta-badge')
            yield Static('Speaker ID · Diarization · Language ID · Translation', id='app-subtitle')
            yield Button('Theme', id='toggle-theme')
            yield Button('Settings', id='toggle-settings')
        with Horizontal(id='body'):
            yield SettingsSidebar(ctrl.settings, id='settings-sidebar')
            with Vertical(id='main'):
                yield StatusIndicators(ctrl.stages(), ctrl.current_stage, id='status-indicators')
                with ContentSwitcher(initial='upload-view', id='views'):
                    with Container(id='upload-view'):
                        yield UploadPanel(ctrl, id='upload-panel')
                    with VerticalScroll(id='results-view'):
                        yield FileInfo(id='file-info')
                        yield ProcessingTimeline(ctrl.session.timeline, id='timeline')
                        with Horizontal(id='results-panels'):
                            yield TranscriptPanel(ctrl, id='transcript-panel')
                            yield TranslationPanel(ctrl, id='translation-panel')
                        yield PlaybackControls(ctrl.playback, id='playback-controls')
        yield Footer()

    def on_mount(self) -> None:
        self.theme = self._config.ui.theme
        self.query_one('#settings-sidebar').display = self._config.ui.show_settings
        self.set_interval(TICK_SECONDS, self._tick_playback)
        if self._initial_file is not None:
            self._accept_file(self._initial_file)

    # --- Upload / processing ---

    def _refresh_status(self) -> None:
        try:
            self.query_one('#status-indicators', StatusIndicators).update_stages(
                self._controller.stages(),
                self._controller.current_stage,
            )
        except NoMatches:  # pragma: no cover -- TUI race guard; widget may not exist during startup
            pass

    def _accept_file(self, audio_file: AudioFile) -> None:
        self._controller.accept_upload(audio_file)
        self._refresh_status()
        self.query_one('#file-info', FileInfo).show_file(audio_file, is_processing=self._controller.is_processing)
        self.query_one('#playback-controls', PlaybackControls).set_file_name(audio_file.name)
        self.query_one('#views', ContentSwitcher).current = 'results-view'
        log.debug('Accepted %s (%d bytes)', audio_file.name, audio_file.size)
        self._processing_timer = self.set_timer(self._config.processing.start_delay, self._begin_processing)

    def _begin_processing(self) -> None:
        if self._processing_timer is not None:
            self._processing_timer.stop()
            self._processing_timer = None
        self._controller.start_processing()
        self._refresh_status()
        self.query_one('#file-info', FileInfo).set_processing(True)

    def on_file_accepted(self, message: FileAccepted) -> None:
        self._accept_file(message.audio_file)

    def on_processing_requested(self, message: ProcessingRequested) -> None:
        self._begin_processing()

    # --- Results / playback ---

    def _refresh_playback(self) -> None:
        try:
            self.query_one('#playback-controls', PlaybackControls).refresh_view()
            timeline = self.query_one('#timeline', ProcessingTimeline)
            timeline.playhead_percent = self._controller.playback.state.progress_percent
        except NoMatches:  # pragma: no cover -- TUI race guard; widget may not exist during startup
            pass

    def _tick_playback(self) -> None:
        if not self._controller.playback.state.is_playing:
            return
        self._controller.playback.tick(TICK_SECONDS)
        self._refresh_playback()

    def on_jump_to_time(self, message: JumpToTime) -> None:
        self._controller.playback.seek_time(message.seconds)
        self._refresh_playback()
        log.debug('Jump to %.1fs', message.seconds)

    def on_playback_changed(self, message: PlaybackChanged) -> None:
        self._refresh_playback()

    def on_setting_changed(self, message: SettingChanged) -> None:
        try:
            self._controller.update_setting(message.name, message.value)
        except ValidationError as e:
            log.warning('Rejected setting %s=%r: %s', message.name, message.value, e)
            self.notify(f'Invalid value for {message.name}', severity='error', timeout=4)

    def on_target_language_changed(self, message: TargetLanguageChanged) -> None:
        self._controller.set_target_language(message.code)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == 'toggle-theme':
            self.action_toggle_theme()
        elif event.button.id == 'toggle-settings':
            self.action_toggle_settings()

    # --- Actions ---

    def action_toggle_theme(self) -> None:
        self.theme = self._dark_theme if self.theme == LIGHT_THEME else LIGHT_THEME

    def action_toggle_settings(self) -> None:
        sidebar = self.query_one('#settings-sidebar', SettingsSidebar)
        sidebar.display = not sidebar.display

    def action_toggle_playback(self) -> None:
        self.query_one('#playback-controls', PlaybackControls).toggle_play_pause()

    def action_show_help(self) -> None:
        if isinstance(self.screen, HelpModal):
            self.screen.dismiss()
            return
        self.push_screen(HelpModal())

    def action_quit_app(self) -> None:
        self.exit()
