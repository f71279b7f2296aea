"""CLI entry point for nicmatch."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from nicmatch import __version__

_CONFIG_OPTION = click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """nicmatch -- pick a bind address by matching network interface names."""


@cli.command()
@_CONFIG_OPTION
@click.option('-p', '--pattern', default=None, help="Interface name pattern; overrides the 'nicmatch' config key.")
@click.option('-s', '--set', 'settings', multiple=True, metavar='KEY=VALUE', help='Override a config key.')
@click.option('-v', '--verbose', is_flag=True, help='Log resolution steps to stderr.')
@click.option('--log-file', default=None, type=click.Path(dir_okay=False), help='Write debug log to this file.')
def resolve(config_path, pattern, settings, verbose, log_file):
    """Print the address selected by the configured pattern."""
    from nicmatch.l1_entities.errors import ConfigError  # noqa: PLC0415 -- deferred: not needed for --help
    from nicmatch.l1_entities.outcome import Failed, NotConfigured  # noqa: PLC0415 -- deferred: not needed for --help
    from nicmatch.l2_use_cases.resolve_address_use_case import CONFIG_KEY  # noqa: PLC0415 -- deferred: not needed for --help
    from nicmatch.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        parse_overrides,
    )
    from nicmatch.l4_frameworks_and_drivers.logging_setup import setup_logging  # noqa: PLC0415 -- deferred: not needed for --help

    setup_logging(verbose=verbose, log_file=Path(log_file) if log_file else None)

    try:
        overrides = parse_overrides(settings)
        if pattern is not None:
            overrides[CONFIG_KEY] = pattern
        container, config = _build(config_path, overrides)
    except ConfigError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    outcome = container.resolver.execute(config)
    if isinstance(outcome, NotConfigured):
        click.echo(f'{CONFIG_KEY} not configured', err=True)
        return
    if isinstance(outcome, Failed):
        click.echo(f'Error: {outcome.error}', err=True)
        sys.exit(1)
    click.echo(str(outcome.address))


@cli.command()
@_CONFIG_OPTION
def interfaces(config_path):
    """List host interfaces and their addresses, in enumeration order."""
    from nicmatch.l1_entities.errors import (  # noqa: PLC0415 -- deferred: not needed for --help
        ConfigError,
        InterfaceEnumerationError,
    )

    try:
        container, _config = _build(config_path, None)
        for nic in container.enumerator.interfaces():
            click.echo(f'{nic.name}\t{",".join(str(a) for a in nic.addresses)}')
    except (ConfigError, InterfaceEnumerationError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)


def _build(config_path, overrides):
    """Load config and wire the container. Returns (container, flat config)."""
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: not needed for --help

    from nicmatch.l1_entities.errors import ConfigError  # noqa: PLC0415 -- deferred: not needed for --help
    from nicmatch.l2_use_cases.ports.config_loader import ConfigLoader  # noqa: PLC0415 -- deferred: not needed for --help
    from nicmatch.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        flatten,
    )
    from nicmatch.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: psutil not loaded on --help
        DependencyContainer,
    )
    from nicmatch.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_infra_config,
    )

    loader: ConfigLoader = DependencyContainer.config_loader()
    raw = loader.load_raw(config_path, overrides=overrides)
    try:
        infra = build_infra_config(raw)
    except ValidationError as e:
        raise ConfigError(f'Invalid settings: {e}') from e
    return DependencyContainer(infra), flatten(raw)
