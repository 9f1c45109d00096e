"""File picker modal -- directory tree filtered to accepted audio formats."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import DirectoryTree, Static


class AudioDirectoryTree(DirectoryTree):
    """DirectoryTree that hides dotfiles and non-audio files."""

    def __init__(self, path: str | Path, accepted_formats: list[str], **kwargs) -> None:
        self.accepted_formats = [f.lower() for f in accepted_formats]
        super().__init__(path, **kwargs)

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        return [
            p
            for p in paths
            if not p.name.startswith('.') and (p.is_dir() or p.suffix.lower() in self.accepted_formats)
        ]


class FilePickerModal(ModalScreen[Path | None]):
    """Modal browser; Enter on a file returns its path, Escape returns None."""

    DEFAULT_CSS = """
    FilePickerModal {
        align: center middle;
    }

    FilePickerModal > Vertical {
        width: 80%;
        max-width: 100;
        height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    FilePickerModal > Vertical > #picker-title {
        text-style: bold;
        margin-bottom: 1;
    }

    FilePickerModal > Vertical > #picker-hint {
        dock: bottom;
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [('escape', 'cancel', 'Cancel')]

    def __init__(self, start_dir: Path, accepted_formats: list[str], **kwargs) -> None:
        super().__init__(**kwargs)
        self._start_dir = start_dir
        self._accepted_formats = accepted_formats

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static('Choose an audio file', id='picker-title')
            yield AudioDirectoryTree(self._start_dir, self._accepted_formats, id='picker-tree')
            yield Static('Enter to choose · Escape to cancel', id='picker-hint')

    def on_mount(self) -> None:
        self.query_one('#picker-tree', AudioDirectoryTree).focus()

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        event.stop()
        self.dismiss(event.path)

    def action_cancel(self) -> None:
        self.dismiss(None)
