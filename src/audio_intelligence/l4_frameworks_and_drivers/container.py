"""Dependency container -- composition root for wiring all layers together."""

from __future__ import annotations

from pathlib import Path

from audio_intelligence.l1_entities.config import AppConfig
from audio_intelligence.l2_use_cases.ports.config_loader import ConfigLoader
from audio_intelligence.l2_use_cases.ports.file_probe import FileProbe
from audio_intelligence.l2_use_cases.ports.session_source import SessionSource
from audio_intelligence.l3_interface_adapters.controllers.session_controller import SessionController
from audio_intelligence.l3_interface_adapters.gateways.local_file_probe import LocalFileProbe
from audio_intelligence.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from audio_intelligence.l3_interface_adapters.gateways.yaml_session_source import YamlSessionSource


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        fixture_path: Path | None = None,
        session_source: SessionSource | None = None,
        file_probe: FileProbe | None = None,
    ) -> None:
        self.config = config
        self.session_source: SessionSource = session_source or YamlSessionSource(fixture_path)
        self.file_probe: FileProbe = file_probe or LocalFileProbe()

        self.controller = SessionController(
            config=config,
            session_source=self.session_source,
            file_probe=self.file_probe,
        )

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()
