"""Shared path constants for configuration and logs."""

from __future__ import annotations

from platformdirs import user_config_path, user_log_path

CONFIG_DIR = user_config_path('audio-intelligence')
LOG_DIR = user_log_path('audio-intelligence')

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
