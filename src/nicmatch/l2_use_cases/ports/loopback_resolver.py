"""Port: loopback address lookup."""

from __future__ import annotations

from typing import Protocol

from nicmatch.l1_entities.interface import Address


class LoopbackResolver(Protocol):
    """Abstract resolver for the local loopback address."""

    def loopback(self) -> Address:
        """Return the loopback address. Raises LoopbackResolutionError on failure."""
        ...
