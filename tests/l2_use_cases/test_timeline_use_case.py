"""Tests for timeline layout helpers."""

from __future__ import annotations

import pytest

from audio_intelligence.l1_entities.segment import TimelineSegment
from audio_intelligence.l2_use_cases.timeline_use_case import (
    playhead_cell,
    segment_span,
    time_markers,
    total_duration,
    track_cells,
    unique_languages,
    unique_speakers,
)
from tests.conftest import make_timeline


class TestSummaryValues:
    def test_total_duration_is_max_end(self):
        assert total_duration(make_timeline()) == 10.0

    def test_total_duration_empty(self):
        assert total_duration([]) == 0.0

    def test_unique_speakers_skip_empty(self):
        assert unique_speakers(make_timeline()) == ['Speaker 1', 'Speaker 2']

    def test_unique_languages_in_first_seen_order(self):
        segments = make_timeline() + [
            TimelineSegment(id='4', start_time=10, end_time=11, speaker='Speaker 1', language='en'),
        ]
        assert unique_languages(segments) == ['en', 'es']


class TestMarkers:
    def test_six_markers(self):
        assert time_markers(25.0) == pytest.approx([0.0, 5.0, 10.0, 15.0, 20.0, 25.0])

    def test_zero_total(self):
        assert time_markers(0.0) == [0.0] * 6


class TestSpans:
    def test_segment_span(self):
        seg = TimelineSegment(id='x', start_time=5.0, end_time=6.0)
        left, width = segment_span(seg, 10.0)
        assert left == pytest.approx(50.0)
        assert width == pytest.approx(10.0)

    def test_zero_total(self):
        assert segment_span(TimelineSegment(id='x', start_time=0, end_time=1), 0) == (0.0, 0.0)


class TestTrackCells:
    def test_cells_follow_segments(self):
        cells = track_cells(make_timeline(), 10)
        ids = [c.id if c else None for c in cells]
        assert ids == ['1', '1', '1', '1', '1', '2', '3', '3', '3', '3']

    def test_gap_is_none(self):
        segments = [
            TimelineSegment(id='a', start_time=0, end_time=2),
            TimelineSegment(id='b', start_time=8, end_time=10),
        ]
        cells = track_cells(segments, 10)
        assert cells[5] is None
        assert cells[0].id == 'a'
        assert cells[9].id == 'b'

    def test_empty(self):
        assert track_cells([], 4) == [None] * 4

    def test_cells_use_percent_spans(self):
        segments = [
            TimelineSegment(id='a', start_time=0, end_time=1),
            TimelineSegment(id='dot', start_time=1, end_time=1),
            TimelineSegment(id='b', start_time=1, end_time=3),
        ]
        cells = track_cells(segments, 6)
        assert [c.id for c in cells] == ['a', 'a', 'b', 'b', 'b', 'b']


class TestPlayhead:
    def test_quarter(self):
        assert playhead_cell(25.0, 60) == 15

    def test_clamped(self):
        assert playhead_cell(100.0, 60) == 59
        assert playhead_cell(-5.0, 60) == 0
