"""Use case: timeline layout -- duration, markers, spans, and character-cell track."""

from __future__ import annotations

from audio_intelligence.l1_entities.segment import TimelineSegment

MARKER_COUNT = 6


def total_duration(segments: list[TimelineSegment]) -> float:
    return max((s.end_time for s in segments), default=0.0)


def unique_speakers(segments: list[TimelineSegment]) -> list[str]:
    """Distinct non-empty speaker labels in order of first appearance."""
    return list(dict.fromkeys(s.speaker for s in segments if s.speaker))


def unique_languages(segments: list[TimelineSegment]) -> list[str]:
    return list(dict.fromkeys(s.language for s in segments if s.language))


def time_markers(total: float, count: int = MARKER_COUNT) -> list[float]:
    """Evenly spaced ruler ticks from 0 to *total* inclusive."""
    if count < 2:
        return [0.0]
    step = total / (count - 1)
    return [step * i for i in range(count)]


def segment_span(segment: TimelineSegment, total: float) -> tuple[float, float]:
    """Return (left%, width%) of *segment* on a track spanning *total* seconds."""
    if total <= 0:
        return 0.0, 0.0
    left = segment.start_time / total * 100
    width = (segment.end_time - segment.start_time) / total * 100
    return left, width


def track_cells(segments: list[TimelineSegment], width: int) -> list[TimelineSegment | None]:
    """Map each of *width* character cells to the segment covering its midpoint, or None for gaps."""
    total = total_duration(segments)
    if width <= 0 or total <= 0:
        return [None] * max(width, 0)
    spans = [(segment_span(s, total), s) for s in segments]
    cells: list[TimelineSegment | None] = []
    for i in range(width):
        pct = (i + 0.5) / width * 100
        cells.append(next((s for (left, span), s in spans if left <= pct < left + span), None))
    return cells


def playhead_cell(percent: float, width: int) -> int:
    """Cell index of a playhead at *percent* of the track."""
    if width <= 0:
        return 0
    return min(max(int(percent / 100 * width), 0), width - 1)
