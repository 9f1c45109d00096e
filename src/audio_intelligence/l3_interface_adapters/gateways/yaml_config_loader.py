"""Gateway: YAML configuration loader -- implements ConfigLoader port."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from audio_intelligence.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('audint.config')


class YamlConfigLoader:
    """Loads raw user configuration from YAML files with override support."""

    def __init__(self, default_paths: list[Path] | None = None) -> None:
        self._default_paths = default_paths if default_paths is not None else DEFAULT_CONFIG_PATHS

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (before Pydantic validation)."""
        data: dict = {}
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
            data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
            log.debug('Loaded config from %s', path)
        else:
            for default_path in self._default_paths:
                if default_path.exists():
                    data = yaml.safe_load(default_path.read_text(encoding='utf-8')) or {}
                    log.debug('Loaded config from %s', default_path)
                    break
        if overrides:
            deep_merge(data, overrides)
        return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
