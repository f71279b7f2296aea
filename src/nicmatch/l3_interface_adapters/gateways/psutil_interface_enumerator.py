"""Gateway: psutil-backed interface enumerator — implements InterfaceEnumerator port."""

from __future__ import annotations

import ipaddress
import logging
import socket
from collections.abc import Iterable, Iterator

import psutil

from nicmatch.l1_entities.errors import InterfaceEnumerationError
from nicmatch.l1_entities.interface import Address, InterfaceDescriptor

log = logging.getLogger('nicmatch.enumerator')

FAMILIES = {
    'ipv4': socket.AF_INET,
    'ipv6': socket.AF_INET6,
}


class PsutilInterfaceEnumerator:
    """Lists host interfaces via ``psutil.net_if_addrs()``, keeping IP addresses only."""

    def __init__(self, families: Iterable[str] = ('ipv4', 'ipv6')) -> None:
        families = set(families)
        unknown = families - FAMILIES.keys()
        if unknown:
            raise ValueError(f"Unknown address families: {', '.join(sorted(unknown))}")
        self._families = {FAMILIES[f] for f in families}

    def interfaces(self) -> Iterator[InterfaceDescriptor]:
        try:
            nics = psutil.net_if_addrs()
        except (OSError, psutil.Error) as e:
            raise InterfaceEnumerationError(f'Cannot enumerate network interfaces: {e}') from e
        log.debug('psutil reported %d interfaces', len(nics))
        for name, entries in nics.items():
            addresses = tuple(
                addr
                for addr in (_parse_address(entry.address) for entry in entries if entry.family in self._families)
                if addr is not None
            )
            yield InterfaceDescriptor(name=name, addresses=addresses)


def _parse_address(text: str) -> Address | None:
    # IPv6 link-local addresses carry a zone suffix, e.g. fe80::1%eth0
    try:
        return ipaddress.ip_address(text.split('%', 1)[0])
    except ValueError:
        log.debug('Skipping unparseable address %r', text)
        return None
