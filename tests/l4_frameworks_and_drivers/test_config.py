"""Tests for AppConfig schema and defaults merging."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from audio_intelligence.l4_frameworks_and_drivers.config import APP_CONFIG_DEFAULTS, build_app_config


class TestBuildAppConfig:
    def test_defaults(self):
        config = build_app_config({})
        assert config.upload.accepted_formats == ['.wav', '.mp3', '.ogg', '.flac', '.m4a']
        assert config.upload.max_size_bytes == 100 * 1024 * 1024
        assert config.processing.start_delay == 1.0
        assert config.processing.active_progress == 65
        assert config.playback.initial_position == 65.0
        assert config.ui.show_settings is True
        assert config.settings.export_format == 'json'

    def test_partial_override_keeps_siblings(self):
        config = build_app_config({'upload': {'max_size_mb': 10}})
        assert config.upload.max_size_mb == 10
        assert config.upload.accepted_formats == ['.wav', '.mp3', '.ogg', '.flac', '.m4a']

    def test_settings_override(self):
        config = build_app_config({'settings': {'export_format': 'srt', 'sample_rate': 16000}})
        assert config.settings.export_format == 'srt'
        assert config.settings.sample_rate == 16000
        assert config.settings.bit_depth == 16

    def test_defaults_not_mutated(self):
        build_app_config({'upload': {'max_size_mb': 1}})
        assert APP_CONFIG_DEFAULTS['upload']['max_size_mb'] == 100

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            build_app_config({'processing': {'active_progress': 150}})

    def test_invalid_setting_rejected(self):
        with pytest.raises(ValidationError):
            build_app_config({'settings': {'bit_depth': 12}})
