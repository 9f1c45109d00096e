"""Gateway: YAML demo-session loader -- implements SessionSource port."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

import yaml
from pydantic import ValidationError

from audio_intelligence.l1_entities.errors import FixtureLoadError
from audio_intelligence.l1_entities.segment import DemoSession

log = logging.getLogger('audint.fixtures')

_FIXTURES_DIR = resources.files('audio_intelligence') / 'fixtures'
BUILTIN_FIXTURE = 'demo_session'


class YamlSessionSource:
    """Reads a DemoSession from the bundled fixture or a user-supplied YAML file."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    def _read_text(self) -> str:
        if self._path is None:
            return (_FIXTURES_DIR / f'{BUILTIN_FIXTURE}.yaml').read_text(encoding='utf-8')
        if not self._path.is_file():
            raise FixtureLoadError(f'Fixture file not found: {self._path}')
        return self._path.read_text(encoding='utf-8')

    def load(self) -> DemoSession:
        source = str(self._path) if self._path is not None else BUILTIN_FIXTURE
        try:
            data = yaml.safe_load(self._read_text()) or {}
        except yaml.YAMLError as e:
            raise FixtureLoadError(f'Invalid YAML in {source}: {e}') from e
        try:
            session = DemoSession.model_validate(data)
        except ValidationError as e:
            raise FixtureLoadError(f'Invalid fixture {source}: {e}') from e
        log.debug(
            'Loaded fixture %s: %d timeline, %d transcript, %d translation segments',
            source,
            len(session.timeline),
            len(session.transcript),
            len(session.translations),
        )
        return session
