"""Gateway: YAML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from nicmatch.l1_entities.errors import ConfigError
from nicmatch.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('nicmatch.config')


class YamlConfigLoader:
    """Loads the agent configuration from YAML as a flat string mapping."""

    def load(
        self,
        config_path: str | None = None,
        overrides: dict[str, str] | None = None,
    ) -> dict[str, str]:
        data = _load_data(config_path, overrides)
        return flatten(data)

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict[str, str] | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (nested sections preserved)."""
        return _load_data(config_path, overrides)


def _load_data(
    config_path: str | None = None,
    overrides: dict[str, str] | None = None,
) -> dict:
    """Resolve, read, and merge YAML config into a plain dict."""
    data: dict = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        data = _read(path)
    else:
        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                data = _read(default_path)
                break
    if overrides:
        data.update(overrides)
    return data


def _read(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f'Invalid YAML in {path}: {e}') from e
    if not isinstance(data, dict):
        raise ConfigError(f'Config file {path} must contain a mapping, got {type(data).__name__}')
    log.debug('Loaded config from %s', path)
    return data


def flatten(data: dict) -> dict[str, str]:
    """Keep scalar top-level entries as strings; nested sections and nulls are dropped."""
    flat: dict[str, str] = {}
    for key, value in data.items():
        if value is None or isinstance(value, dict | list):
            continue
        if isinstance(value, bool):
            flat[str(key)] = 'true' if value else 'false'
        else:
            flat[str(key)] = str(value)
    return flat


def parse_overrides(pairs: tuple[str, ...] | list[str]) -> dict[str, str]:
    """Parse ``key=value`` strings. Raises ConfigError on a pair without '='."""
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep or not key:
            raise ConfigError(f"Expected KEY=VALUE, got '{pair}'")
        overrides[key.strip()] = value
    return overrides
