"""Gateway: socket-based loopback resolver — implements LoopbackResolver port."""

from __future__ import annotations

import ipaddress
import logging
import socket

from nicmatch.l1_entities.errors import LoopbackResolutionError
from nicmatch.l1_entities.interface import Address

log = logging.getLogger('nicmatch.loopback')


class SocketLoopbackResolver:
    """Resolves "no host name" to the loopback address through the system resolver."""

    def __init__(self, prefer_ipv6: bool = False) -> None:
        self._prefer_ipv6 = prefer_ipv6

    def loopback(self) -> Address:
        family = socket.AF_INET6 if self._prefer_ipv6 else socket.AF_INET
        try:
            infos = socket.getaddrinfo(None, 0, family, socket.SOCK_STREAM)
        except OSError as e:
            raise LoopbackResolutionError(f'Can not lookup loopback interface: {e}') from e
        if not infos:
            raise LoopbackResolutionError('Can not lookup loopback interface: no addresses returned')
        address = ipaddress.ip_address(infos[0][4][0])
        log.debug('Loopback resolved to %s', address)
        return address
