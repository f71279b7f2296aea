"""Domain error types."""

from __future__ import annotations


class AddressResolutionError(Exception):
    """Raised when a configured address cannot be resolved."""


class InvalidPatternError(AddressResolutionError):
    """Raised when the configured value does not compile as a regular expression."""

    def __init__(self, key: str, value: str) -> None:
        super().__init__(f"Error parsing pattern: '{value}' from config: '{key}'.")
        self.key = key
        self.value = value


class InterfaceEnumerationError(AddressResolutionError):
    """Raised when the host network interfaces cannot be listed."""


class LoopbackResolutionError(AddressResolutionError):
    """Raised when the loopback address cannot be looked up."""


class ConfigError(Exception):
    """Raised when a configuration file is not a usable key/value mapping."""
