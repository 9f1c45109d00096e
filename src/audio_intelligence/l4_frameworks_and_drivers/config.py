"""Application config defaults -- merged under user YAML, then validated."""

from __future__ import annotations

import copy

from audio_intelligence.l1_entities.config import AppConfig
from audio_intelligence.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'upload': {
        'accepted_formats': ['.wav', '.mp3', '.ogg', '.flac', '.m4a'],
        'max_size_mb': 100,
    },
    'processing': {
        'start_delay': 1.0,
        'active_progress': 65,
    },
    'playback': {
        'total_time': 300.0,
        'initial_position': 65.0,
        'initial_volume': 75,
        'skip_seconds': 10.0,
        'speeds': [0.5, 0.75, 1.0, 1.25, 1.5, 2.0],
    },
    'ui': {
        'show_settings': True,
        'theme': 'textual-dark',
    },
    'settings': {
        'sample_rate': 44100,
        'bit_depth': 16,
        'noise_reduction': True,
        'echo_cancellation': False,
        'noise_gate_db': -40,
        'speaker_verification': True,
        'min_speaker_duration': 2.0,
        'similarity_threshold': 75,
        'target_language': 'auto',
        'auto_translate': True,
        'include_timestamps': True,
        'confidence_scores': False,
        'export_format': 'json',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
