"""Tests for AudioSettings validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from audio_intelligence.l1_entities.settings import EXPORT_FORMATS, AudioSettings


class TestDefaults:
    def test_defaults(self):
        s = AudioSettings()
        assert s.sample_rate == 44100
        assert s.bit_depth == 16
        assert s.noise_reduction is True
        assert s.echo_cancellation is False
        assert s.noise_gate_db == -40
        assert s.speaker_verification is True
        assert s.min_speaker_duration == 2.0
        assert s.similarity_threshold == 75
        assert s.target_language == 'auto'
        assert s.auto_translate is True
        assert s.include_timestamps is True
        assert s.confidence_scores is False
        assert s.export_format == 'json'

    def test_export_formats_cover_literal_choices(self):
        assert set(EXPORT_FORMATS) == {'json', 'txt', 'srt', 'vtt', 'csv'}


class TestAssignmentValidation:
    def test_valid_assignment(self):
        s = AudioSettings()
        s.sample_rate = 48000
        s.noise_gate_db = -80
        s.similarity_threshold = 100
        s.target_language = 'ja'
        assert (s.sample_rate, s.noise_gate_db, s.similarity_threshold, s.target_language) == (48000, -80, 100, 'ja')

    @pytest.mark.parametrize(
        ('name', 'value'),
        [
            ('sample_rate', 12345),
            ('bit_depth', 8),
            ('noise_gate_db', 5),
            ('noise_gate_db', -81),
            ('similarity_threshold', 45),
            ('similarity_threshold', 77),
            ('min_speaker_duration', 3.0),
            ('target_language', 'xx'),
            ('export_format', 'docx'),
        ],
    )
    def test_invalid_assignment_rejected(self, name, value):
        s = AudioSettings()
        with pytest.raises(ValidationError):
            setattr(s, name, value)

    def test_min_speaker_duration_accepts_listed_value(self):
        s = AudioSettings()
        s.min_speaker_duration = 0.5
        assert s.min_speaker_duration == 0.5
