"""Resolution outcome: not configured, resolved to an address, or failed."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from nicmatch.l1_entities.errors import AddressResolutionError
from nicmatch.l1_entities.interface import Address


class ErrorKind(enum.Enum):
    INVALID_PATTERN = 'invalid_pattern'
    ENUMERATION_ERROR = 'enumeration_error'
    LOOPBACK_RESOLUTION_ERROR = 'loopback_resolution_error'


@dataclass(frozen=True)
class NotConfigured:
    """No pattern configured; the feature is unused."""

    def address_or_none(self) -> Address | None:
        return None


@dataclass(frozen=True)
class Resolved:
    """An address was selected.

    ``interface`` names the matching interface, or is None when the address
    came from the loopback fallback.
    """

    address: Address
    interface: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.interface is None

    def address_or_none(self) -> Address | None:
        return self.address


@dataclass(frozen=True)
class Failed:
    """Resolution failed outright; there is no degraded result."""

    kind: ErrorKind
    error: AddressResolutionError

    def address_or_none(self) -> Address | None:
        """Re-raise the captured error with a fresh traceback on every call."""
        raise self.error.with_traceback(None)


ResolutionOutcome = NotConfigured | Resolved | Failed
