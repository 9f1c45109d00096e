"""File info card -- uploaded file summary and the Start Processing trigger."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static

from audio_intelligence.l1_entities.audio_file import AudioFile
from audio_intelligence.l4_frameworks_and_drivers.messages import ProcessingRequested


def file_meta_text(file: AudioFile) -> str:
    return f'{file.size_mb:.2f} MB • {file.type_label}'


class FileInfo(Horizontal):
    DEFAULT_CSS = """
    FileInfo {
        height: auto;
        border: round $panel-lighten-1;
        padding: 0 1;
    }
    FileInfo > Vertical {
        width: 1fr;
        height: auto;
    }
    FileInfo #file-name {
        text-style: bold;
    }
    FileInfo #file-meta {
        color: $text-muted;
    }
    FileInfo #processing-label {
        width: auto;
        color: $accent;
        padding-top: 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.audio_file: AudioFile | None = None
        self.is_processing = False

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static('', id='file-name', markup=False)
            yield Static('', id='file-meta', markup=False)
        yield Static('⟳ Processing...', id='processing-label')
        yield Button('Start Processing', id='start-processing', variant='primary')

    def on_mount(self) -> None:
        self._refresh_view()

    def show_file(self, audio_file: AudioFile, *, is_processing: bool) -> None:
        self.audio_file = audio_file
        self.is_processing = is_processing
        self._refresh_view()

    def set_processing(self, is_processing: bool) -> None:
        self.is_processing = is_processing
        self._refresh_view()

    def _refresh_view(self) -> None:
        if self.audio_file is not None:
            self.query_one('#file-name', Static).update(f'♫ {self.audio_file.name}')
            self.query_one('#file-meta', Static).update(file_meta_text(self.audio_file))
        self.query_one('#processing-label').display = self.is_processing
        self.query_one('#start-processing').display = not self.is_processing

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == 'start-processing':
            event.stop()
            self.post_message(ProcessingRequested())
