"""Transcript panel -- searchable speaker-attributed segments."""

from __future__ import annotations

from audio_intelligence.l2_use_cases.export_use_case import copy_transcript_text
from audio_intelligence.l2_use_cases.search_use_case import filter_transcript, transcript_stats
from audio_intelligence.l3_interface_adapters.controllers.session_controller import SessionController
from audio_intelligence.l4_frameworks_and_drivers.widgets.results_panel import ResultsPanel
from audio_intelligence.l4_frameworks_and_drivers.widgets.segment_card import SegmentCard, TranscriptCard


class TranscriptPanel(ResultsPanel):
    panel_title = 'Transcript'
    noun = 'Transcript'

    def __init__(self, controller: SessionController, **kwargs) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self.segments = controller.session.transcript

    def build_cards(self) -> list[SegmentCard]:
        return [TranscriptCard(seg) for seg in self.segments]

    def matching_ids(self, query: str) -> set[str]:
        return {s.id for s in filter_transcript(self.segments, query)}

    def stats_text(self) -> str:
        stats = transcript_stats(self.segments)
        return f'{stats.segments} segments · {stats.speakers} speakers · {stats.languages} languages'

    def copy_text(self) -> str:
        return copy_transcript_text(self.segments)

    def export_text(self) -> tuple[str, str]:
        return self._controller.settings.export_format, self._controller.export_transcript()
