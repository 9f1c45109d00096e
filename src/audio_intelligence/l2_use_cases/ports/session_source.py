"""Port: source of the demo session fixture rendered in the results view."""

from __future__ import annotations

from typing import Protocol

from audio_intelligence.l1_entities.segment import DemoSession


class SessionSource(Protocol):
    """Abstract provider of timeline, transcript, and translation fixtures."""

    def load(self) -> DemoSession:
        """Return the fixture bundle. Raises FixtureLoadError when it cannot be read."""
        ...
