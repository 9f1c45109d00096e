"""CLI entry point for audio-intelligence."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from audio_intelligence import __version__


@click.command()
@click.argument('audio_file', required=False, type=click.Path(dir_okay=False))
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '--fixture',
    'fixture_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Demo session YAML to display instead of the bundled one.',
)
@click.option('--no-settings', is_flag=True, default=False, help='Start with the settings sidebar hidden.')
@click.option(
    '--log-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for audint_debug.log (defaults to the user log dir).',
)
@click.version_option(version=__version__)
def cli(audio_file, config_path, fixture_path, no_settings, log_dir):
    """audio-intelligence -- terminal mockup of a speaker, language, and translation analysis front end."""
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: not needed for --help
    from textual.theme import BUILTIN_THEMES  # noqa: PLC0415 -- deferred: not needed for --help

    from audio_intelligence.l1_entities.errors import (  # noqa: PLC0415 -- deferred: not needed for --help
        FixtureLoadError,
        UploadValidationError,
    )
    from audio_intelligence.l3_interface_adapters.gateways.paths import (  # noqa: PLC0415 -- deferred: not needed for --help
        LOG_DIR,
    )
    from audio_intelligence.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )
    from audio_intelligence.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        DependencyContainer,
    )
    from audio_intelligence.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    try:
        overrides: dict = {}
        if no_settings:
            overrides['ui'] = {'show_settings': False}
        raw = DependencyContainer.config_loader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f'Error: invalid configuration: {e}', err=True)
        sys.exit(1)

    if config.ui.theme not in BUILTIN_THEMES:
        click.echo(
            f'Error: invalid configuration: unknown theme {config.ui.theme!r} '
            f'(choose from {", ".join(sorted(BUILTIN_THEMES))})',
            err=True,
        )
        sys.exit(1)

    try:
        container = DependencyContainer(config, fixture_path=Path(fixture_path) if fixture_path else None)
    except FixtureLoadError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    resolved_log_dir = Path(log_dir) if log_dir else LOG_DIR
    setup_file_logging(resolved_log_dir)

    initial_file = None
    if audio_file:
        try:
            initial_file = container.controller.select_path(Path(audio_file))
        except (FileNotFoundError, UploadValidationError) as e:
            click.echo(f'Error: {e}', err=True)
            sys.exit(1)

    from audio_intelligence.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help
        AudioIntelligenceApp,
    )

    app = AudioIntelligenceApp(
        config=config,
        controller=container.controller,
        initial_file=initial_file,
        log_dir=resolved_log_dir,
    )
    app.run()
