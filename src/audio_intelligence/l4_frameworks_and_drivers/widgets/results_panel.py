"""Shared shell for the searchable transcript and translation panels."""

from __future__ import annotations

import pyperclip
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Input, Static

from audio_intelligence.l4_frameworks_and_drivers.widgets.export_modal import ExportModal
from audio_intelligence.l4_frameworks_and_drivers.widgets.segment_card import SegmentCard


class ResultsPanel(Vertical):
    """Title row with Copy/Export, search box, stats line, and a scrolling card list.

    Subclasses supply the cards, the filter, the stats line, and the
    clipboard/export text.
    """

    DEFAULT_CSS = """
    ResultsPanel {
        height: 1fr;
        border: round $panel-lighten-1;
        padding: 0 1;
    }
    ResultsPanel .panel-header {
        height: auto;
    }
    ResultsPanel .panel-title {
        width: 1fr;
        text-style: bold;
        padding-top: 1;
    }
    ResultsPanel .panel-header Button {
        min-width: 8;
        margin-left: 1;
    }
    ResultsPanel .panel-stats {
        color: $text-muted;
    }
    ResultsPanel .card-list {
        height: 1fr;
        scrollbar-size: 1 1;
    }
    ResultsPanel .no-results {
        color: $text-muted;
        text-align: center;
        width: 100%;
        padding: 1 0;
    }
    """

    BINDINGS = [Binding('c', 'copy_content', 'Copy', show=False)]

    panel_title = 'Results'
    noun = 'Results'

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.query_text = ''
        self.selected_id: str | None = None

    # --- subclass hooks ---

    def build_cards(self) -> list[SegmentCard]:
        raise NotImplementedError

    def matching_ids(self, query: str) -> set[str]:
        raise NotImplementedError

    def stats_text(self) -> str:
        raise NotImplementedError

    def copy_text(self) -> str:
        raise NotImplementedError

    def export_text(self) -> tuple[str, str]:
        """Return (format, rendered text) for the export modal."""
        raise NotImplementedError

    def compose_extra(self) -> ComposeResult:
        yield from ()

    # --- composition ---

    def compose(self) -> ComposeResult:
        with Horizontal(classes='panel-header'):
            yield Static(self.panel_title, classes='panel-title')
            yield Button('Copy', classes='copy-button')
            yield Button('Export', classes='export-button')
        yield from self.compose_extra()
        yield Input(placeholder=f'Search {self.noun.lower()}...', classes='search-input')
        yield Static(self.stats_text(), classes='panel-stats')
        with VerticalScroll(classes='card-list'):
            yield from self.build_cards()
            yield Static('', classes='no-results', markup=False)

    def on_mount(self) -> None:
        self.query_one('.no-results', Static).display = False

    @property
    def cards(self) -> list[SegmentCard]:
        return list(self.query(SegmentCard))

    @property
    def visible_cards(self) -> list[SegmentCard]:
        return [c for c in self.cards if c.display]

    def set_title(self, title: str) -> None:
        self.query_one('.panel-title', Static).update(title)

    # --- search ---

    def apply_filter(self, query: str) -> None:
        """Show only cards matching *query*; show the no-results line when nothing matches."""
        self.query_text = query
        keep = self.matching_ids(query)
        for card in self.cards:
            card.display = card.segment_id in keep
        no_results = self.query_one('.no-results', Static)
        if query and not keep:
            no_results.update(f'No results found for "{query}"')
            no_results.display = True
        else:
            no_results.display = False

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.has_class('search-input'):
            event.stop()
            self.apply_filter(event.value)

    # --- selection ---

    def on_segment_card_selected(self, event: SegmentCard.Selected) -> None:
        event.stop()
        self.toggle_selection(event.card.segment_id)

    def toggle_selection(self, segment_id: str) -> None:
        self.selected_id = None if self.selected_id == segment_id else segment_id
        for card in self.cards:
            card.selected = card.segment_id == self.selected_id

    # --- copy / export ---

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class('copy-button'):
            event.stop()
            self.action_copy_content()
        elif event.button.has_class('export-button'):
            event.stop()
            self.action_export()

    def action_copy_content(self) -> None:
        """Copy every segment (ignoring the filter) to the system clipboard."""
        text = self.copy_text()
        if not text:
            self.app.notify(f'No {self.noun.lower()} to copy', severity='warning', timeout=2)
            return
        pyperclip.copy(text)
        self.app.notify(f'{self.noun} copied', timeout=2)

    def action_export(self) -> None:
        fmt, body = self.export_text()
        self.app.push_screen(ExportModal(f'Export {self.noun}', fmt, body))
