"""Port: configuration loader."""

from __future__ import annotations

from typing import Protocol


class ConfigLoader(Protocol):
    """Abstract configuration loader."""

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return user configuration as a plain dict, merged with *overrides*."""
        ...
