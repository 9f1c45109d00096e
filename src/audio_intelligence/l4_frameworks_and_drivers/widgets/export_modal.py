"""Export modal -- preview of rendered export text with a copy shortcut."""

from __future__ import annotations

import pyperclip
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static


class ExportModal(ModalScreen[None]):
    """Shows an export rendering. c copies it, Escape closes."""

    DEFAULT_CSS = """
    ExportModal {
        align: center middle;
    }

    ExportModal > VerticalScroll {
        width: 80%;
        max-width: 110;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    ExportModal > VerticalScroll > #export-title {
        text-style: bold;
        margin-bottom: 1;
    }

    ExportModal > VerticalScroll > #export-body {
        height: auto;
    }

    ExportModal > VerticalScroll > #export-hint {
        dock: bottom;
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ('escape', 'dismiss', 'Close'),
        ('c', 'copy_export', 'Copy'),
    ]

    def __init__(self, title: str, fmt: str, body: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._title = title
        self._fmt = fmt
        self.body = body

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(f'{self._title} ({self._fmt.upper()})', id='export-title')
            yield Static(self.body, id='export-body', markup=False)
            yield Static('Press c to copy · Escape to close', id='export-hint')

    def action_copy_export(self) -> None:
        pyperclip.copy(self.body)
        self.app.notify(f'{self._fmt.upper()} export copied', timeout=2)
