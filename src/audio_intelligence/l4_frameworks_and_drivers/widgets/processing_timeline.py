"""Processing timeline -- speaker/language track rendered into character cells."""

from __future__ import annotations

from rich.console import Group
from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

from audio_intelligence.l1_entities.language import language_info
from audio_intelligence.l1_entities.segment import (
    SegmentType,
    TimelineSegment,
    format_confidence,
    format_timeline_time,
)
from audio_intelligence.l1_entities.speaker import speaker_color
from audio_intelligence.l2_use_cases.timeline_use_case import (
    playhead_cell,
    time_markers,
    total_duration,
    track_cells,
    unique_languages,
    unique_speakers,
)

TRACK_WIDTH = 60
DEFAULT_PLAYHEAD_PERCENT = 25.0

_BLOCK = '█'
_SILENCE = '░'
_NOISE = '▒'
_PLAYHEAD = '┃'


def _marker_ruler(markers: list[float], width: int) -> Text:
    """Place marker labels along *width* cells; the last label is right-aligned."""
    ruler = [' '] * width
    last = len(markers) - 1
    for i, t in enumerate(markers):
        label = format_timeline_time(t)
        pos = round(i / last * width) if last else 0
        pos = min(pos, width - len(label))
        for j, ch in enumerate(label):
            ruler[pos + j] = ch
    return Text(''.join(ruler), style='dim')


class ProcessingTimeline(Static):
    """Timeline card: header stats, ruler, coloured track, playhead, legend, and details."""

    DEFAULT_CSS = """
    ProcessingTimeline {
        height: auto;
        border: round $panel-lighten-1;
        padding: 0 1;
    }
    """

    playhead_percent: reactive[float] = reactive(DEFAULT_PLAYHEAD_PERCENT)

    def __init__(self, segments: list[TimelineSegment], *, track_width: int = TRACK_WIDTH, **kwargs) -> None:
        super().__init__(**kwargs)
        self.segments = segments
        self.track_width = track_width
        self.border_title = 'Processing Timeline'

    @property
    def total(self) -> float:
        return total_duration(self.segments)

    @property
    def speakers(self) -> list[str]:
        return unique_speakers(self.segments)

    @property
    def languages(self) -> list[str]:
        return unique_languages(self.segments)

    def header_text(self) -> str:
        return (
            f'Total Duration: {format_timeline_time(self.total)}'
            f'  ·  {len(self.speakers)} Speakers'
            f'  ·  {len(self.languages)} Languages'
        )

    def track_text(self) -> Text:
        width = self.track_width
        head = playhead_cell(self.playhead_percent, width)
        track = Text()
        for i, seg in enumerate(track_cells(self.segments, width)):
            if i == head:
                track.append(_PLAYHEAD, style='bold red')
            elif seg is None:
                track.append(' ')
            elif seg.type == SegmentType.SPEECH:
                track.append(_BLOCK, style=speaker_color(seg.speaker))
            elif seg.type == SegmentType.NOISE:
                track.append(_NOISE, style='yellow')
            else:
                track.append(_SILENCE, style='dim')
        return track

    def legend_text(self) -> Text:
        legend = Text()
        for speaker in self.speakers:
            legend.append('■ ', style=speaker_color(speaker))
            legend.append(f'{speaker}   ')
        legend.append('░ ', style='dim')
        legend.append('Silence')
        return legend

    def details_text(self) -> Text:
        details = Text()
        for seg in self.segments:
            if seg.type != SegmentType.SPEECH:
                continue
            lang = language_info(seg.language)
            if details:
                details.append('\n')
            details.append(f'{seg.speaker}', style=speaker_color(seg.speaker))
            details.append(
                f'  {lang.flag} {seg.language.upper()}'
                f'  {format_timeline_time(seg.start_time)} - {format_timeline_time(seg.end_time)}'
                f'  {format_confidence(seg.confidence)}',
                style='dim',
            )
        return details

    def render(self) -> Group:
        return Group(
            Text(self.header_text(), style='bold'),
            _marker_ruler(time_markers(self.total), self.track_width),
            self.track_text(),
            self.legend_text(),
            Text(''),
            self.details_text(),
        )
