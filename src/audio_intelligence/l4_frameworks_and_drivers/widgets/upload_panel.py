"""Upload panel -- path entry and file picker with client-side validation."""

from __future__ import annotations

from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Button, Input, Static

from audio_intelligence.l1_entities.errors import UploadValidationError
from audio_intelligence.l2_use_cases.upload_use_case import format_size_limit
from audio_intelligence.l3_interface_adapters.controllers.session_controller import SessionController
from audio_intelligence.l4_frameworks_and_drivers.messages import FileAccepted
from audio_intelligence.l4_frameworks_and_drivers.widgets.file_picker_modal import FilePickerModal

FEATURES = ['Speaker ID', 'Diarization', 'Language ID', 'Translation']


class UploadPanel(Vertical):
    """Drop zone stand-in: paste or type a path (terminals paste dropped files as paths)."""

    DEFAULT_CSS = """
    UploadPanel {
        width: 100%;
        max-width: 90;
        height: auto;
        border: dashed $panel-lighten-2;
        padding: 1 4;
    }
    UploadPanel.error {
        border: dashed $error;
    }
    UploadPanel #upload-title {
        text-style: bold;
        text-align: center;
        width: 100%;
    }
    UploadPanel #upload-error-text {
        color: $error;
        text-style: bold;
        text-align: center;
        width: 100%;
    }
    UploadPanel .upload-info {
        color: $text-muted;
        text-align: center;
        width: 100%;
    }
    UploadPanel #upload-actions, UploadPanel #upload-error {
        height: auto;
        align-horizontal: center;
    }
    UploadPanel #features {
        height: auto;
        margin-top: 1;
        align-horizontal: center;
    }
    UploadPanel .feature {
        width: auto;
        color: $success;
        margin: 0 2;
    }
    """

    error: reactive[str] = reactive('')

    def __init__(self, controller: SessionController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller

    def compose(self) -> ComposeResult:
        formats = ', '.join(self._controller.accepted_formats)
        yield Static('Upload Audio File', id='upload-title')
        with Vertical(id='upload-normal'):
            yield Static(
                'Drag and drop your audio file here, or choose one to browse',
                classes='upload-info',
            )
            yield Input(placeholder='drop or paste an audio file path', id='upload-path')
            with Horizontal(id='upload-actions'):
                yield Button('Choose File', id='choose-file', variant='primary')
            yield Static(f'Supported formats: {formats}', classes='upload-info')
            yield Static(
                f'Maximum file size: {format_size_limit(self._controller.max_upload_bytes)}',
                classes='upload-info',
            )
        with Vertical(id='upload-error'):
            yield Static('', id='upload-error-text', markup=False)
            yield Button('Clear Error', id='clear-error', variant='default')
        with Horizontal(id='features'):
            for label in FEATURES:
                yield Static(f'✔ {label}', classes='feature')

    def on_mount(self) -> None:
        self.query_one('#upload-error').display = False

    def watch_error(self, error: str) -> None:
        try:
            self.query_one('#upload-title', Static).update('Upload Error' if error else 'Upload Audio File')
            self.query_one('#upload-error-text', Static).update(error)
            self.query_one('#upload-error').display = bool(error)
            self.query_one('#upload-normal').display = not error
        except NoMatches:  # pragma: no cover -- TUI race guard; children may not be mounted yet
            pass
        self.set_class(bool(error), 'error')

    def select_path(self, raw: str) -> None:
        """Validate *raw* as a path; show the error or post FileAccepted."""
        self.error = ''
        text = raw.strip().strip('\'"')
        if not text:
            return
        try:
            audio_file = self._controller.select_path(Path(text))
        except (FileNotFoundError, UploadValidationError) as e:
            self.error = str(e)
            return
        self.post_message(FileAccepted(audio_file))

    def clear_error(self) -> None:
        self.error = ''

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == 'upload-path':
            event.stop()
            self.select_path(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == 'clear-error':
            event.stop()
            self.clear_error()
        elif event.button.id == 'choose-file':
            event.stop()
            self.app.push_screen(
                FilePickerModal(Path.cwd(), self._controller.accepted_formats),
                callback=self._on_picked,
            )

    def _on_picked(self, path: Path | None) -> None:
        if path is not None:
            self.select_path(str(path))
