"""Port: host network interface enumeration."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from nicmatch.l1_entities.interface import InterfaceDescriptor


class InterfaceEnumerator(Protocol):
    """Abstract interface lister. Zero framework types leak through."""

    def interfaces(self) -> Iterable[InterfaceDescriptor]:
        """List interfaces in host order. Raises InterfaceEnumerationError on host failure."""
        ...
