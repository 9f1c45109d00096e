"""Tests for CLI entry point -- patches deferred imports at source module level."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from audio_intelligence import __version__
from audio_intelligence.l4_frameworks_and_drivers.cli import cli

# Patch targets at SOURCE module level (not cli module) because cli() uses
# deferred `from X import Y` which creates local bindings that bypass
# module-level attribute patches.
_APP = 'audio_intelligence.l4_frameworks_and_drivers.app.AudioIntelligenceApp'


def _write_audio(tmp_path: Path, name: str = 'talk.wav', size: int = 1024) -> Path:
    p = tmp_path / name
    p.write_bytes(b'\x00' * size)
    return p


@pytest.fixture(autouse=True)
def clean_logger():
    logger = logging.getLogger('audint')
    before = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in before:
            handler.close()
            logger.removeHandler(handler)


class TestCliErrors:
    def test_version(self):
        result = CliRunner().invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_config_file(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ['-c', str(tmp_path / 'nope.yaml')])
        assert result.exit_code == 1
        assert 'Error: Config file not found' in result.output

    def test_invalid_config_value(self, tmp_path: Path):
        cfg = tmp_path / 'config.yaml'
        cfg.write_text('settings:\n  bit_depth: 3\n', encoding='utf-8')
        result = CliRunner().invoke(cli, ['-c', str(cfg)])
        assert result.exit_code == 1
        assert 'Error: invalid configuration' in result.output

    def test_unsupported_audio_file(self, tmp_path: Path):
        p = _write_audio(tmp_path, 'notes.txt')
        with patch(_APP) as app_cls:
            result = CliRunner().invoke(cli, [str(p), '--log-dir', str(tmp_path / 'logs')])
        assert result.exit_code == 1
        assert 'Error: File type not supported' in result.output
        app_cls.assert_not_called()

    def test_oversize_audio_file(self, tmp_path: Path):
        p = _write_audio(tmp_path, 'big.wav', size=2 * 1024 * 1024)
        cfg = tmp_path / 'config.yaml'
        cfg.write_text('upload:\n  max_size_mb: 1\n', encoding='utf-8')
        with patch(_APP) as app_cls:
            result = CliRunner().invoke(cli, [str(p), '-c', str(cfg), '--log-dir', str(tmp_path)])
        assert result.exit_code == 1
        assert 'Error: File too large. Maximum size is 1MB' in result.output
        app_cls.assert_not_called()

    def test_missing_audio_file(self, tmp_path: Path):
        result = CliRunner().invoke(cli, [str(tmp_path / 'ghost.mp3'), '--log-dir', str(tmp_path)])
        assert result.exit_code == 1
        assert 'Error: File not found' in result.output

    def test_unknown_theme(self, tmp_path: Path):
        cfg = tmp_path / 'config.yaml'
        cfg.write_text('ui:\n  theme: solarized-nope\n', encoding='utf-8')
        with patch(_APP) as app_cls:
            result = CliRunner().invoke(cli, ['-c', str(cfg), '--log-dir', str(tmp_path)])
        assert result.exit_code == 1
        assert "Error: invalid configuration: unknown theme 'solarized-nope'" in result.output
        assert 'textual-dark' in result.output
        app_cls.assert_not_called()

    def test_rejected_file_is_logged(self, tmp_path: Path, clean_logger):
        p = _write_audio(tmp_path, 'notes.txt')
        log_dir = tmp_path / 'logs'
        with patch(_APP):
            result = CliRunner().invoke(cli, [str(p), '--log-dir', str(log_dir)])
        assert result.exit_code == 1
        for handler in clean_logger.handlers:
            handler.flush()
        assert 'Rejected upload notes.txt' in (log_dir / 'audint_debug.log').read_text(encoding='utf-8')

    def test_bad_fixture(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ['--fixture', str(tmp_path / 'missing.yaml')])
        assert result.exit_code == 1
        assert 'Error: Fixture file not found' in result.output


class TestCliLaunch:
    def test_launches_app_without_file(self, tmp_path: Path):
        with patch(_APP) as app_cls:
            result = CliRunner().invoke(cli, ['--log-dir', str(tmp_path)])
        assert result.exit_code == 0, result.output
        kwargs = app_cls.call_args.kwargs
        assert kwargs['initial_file'] is None
        assert kwargs['log_dir'] == tmp_path
        app_cls.return_value.run.assert_called_once()

    def test_launches_app_with_valid_file(self, tmp_path: Path):
        p = _write_audio(tmp_path, 'meeting.mp3')
        with patch(_APP) as app_cls:
            result = CliRunner().invoke(cli, [str(p), '--log-dir', str(tmp_path)])
        assert result.exit_code == 0, result.output
        initial = app_cls.call_args.kwargs['initial_file']
        assert initial.name == 'meeting.mp3'
        assert initial.size == 1024

    def test_no_settings_flag(self, tmp_path: Path):
        with patch(_APP) as app_cls:
            result = CliRunner().invoke(cli, ['--no-settings', '--log-dir', str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert app_cls.call_args.kwargs['config'].ui.show_settings is False

    def test_custom_fixture(self, tmp_path: Path):
        fixture = tmp_path / 'session.yaml'
        fixture.write_text(
            'transcript:\n'
            '  - {id: a, speaker: Speaker 1, start_time: 0, end_time: 1, text: hello, confidence: 0.9, language: en}\n',
            encoding='utf-8',
        )
        with patch(_APP) as app_cls:
            result = CliRunner().invoke(cli, ['--fixture', str(fixture), '--log-dir', str(tmp_path)])
        assert result.exit_code == 0, result.output
        controller = app_cls.call_args.kwargs['controller']
        assert [s.text for s in controller.session.transcript] == ['hello']
