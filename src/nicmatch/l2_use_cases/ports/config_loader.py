"""Port: agent configuration loader."""

from __future__ import annotations

from typing import Protocol


class ConfigLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract configuration loader producing a flat key/value mapping."""

    def load(
        self,
        config_path: str | None = None,
        overrides: dict[str, str] | None = None,
    ) -> dict[str, str]:
        """Load configuration, merging overrides."""
        ...

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict[str, str] | None = None,
    ) -> dict:
        """Return the merged configuration with nested settings sections intact."""
        ...
