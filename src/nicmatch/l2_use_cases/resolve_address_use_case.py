"""Use case: resolve a bind address from a NIC-matching pattern."""

from __future__ import annotations

import ipaddress
import logging
import re
from collections.abc import Iterator, Mapping

from nicmatch.l1_entities.errors import (
    InterfaceEnumerationError,
    InvalidPatternError,
    LoopbackResolutionError,
)
from nicmatch.l1_entities.interface import InterfaceDescriptor
from nicmatch.l1_entities.outcome import ErrorKind, Failed, NotConfigured, ResolutionOutcome, Resolved
from nicmatch.l2_use_cases.ports.interface_enumerator import InterfaceEnumerator
from nicmatch.l2_use_cases.ports.loopback_resolver import LoopbackResolver

log = logging.getLogger('nicmatch.resolver')

CONFIG_KEY = 'nicmatch'


class ResolveAddressUseCase:
    """Picks the first address of the first interface whose name matches the configured pattern.

    Falls back to the loopback address when the pattern matches nothing usable.
    Holds no state between calls; every call re-enumerates the host.
    """

    def __init__(self, enumerator: InterfaceEnumerator, loopback_resolver: LoopbackResolver) -> None:
        self._enumerator = enumerator
        self._loopback = loopback_resolver

    def execute(self, config: Mapping[str, str]) -> ResolutionOutcome:
        value = config.get(CONFIG_KEY)
        if not value:
            log.debug('%s not configured, skipping address resolution', CONFIG_KEY)
            return NotConfigured()

        try:
            pattern = re.compile(value)
        except re.error as e:
            err = InvalidPatternError(CONFIG_KEY, value)
            err.__cause__ = e
            log.warning('%s', err)
            return Failed(ErrorKind.INVALID_PATTERN, err)

        try:
            match = self._scan(pattern, value)
        except InterfaceEnumerationError as e:
            log.warning('%s', e)
            return Failed(ErrorKind.ENUMERATION_ERROR, e)
        if match is not None:
            return match

        try:
            address = self._loopback.loopback()
        except LoopbackResolutionError as e:
            log.warning('%s', e)
            return Failed(ErrorKind.LOOPBACK_RESOLUTION_ERROR, e)
        log.info("No interface matched '%s', falling back to loopback %s", value, address)
        return Resolved(address)

    def _scan(self, pattern: re.Pattern[str], value: str) -> Resolved | None:
        try:
            nics = iter(self._enumerator.interfaces())
        except OSError as e:
            raise _enumeration_error(value) from e
        try:
            return _first_match(pattern, value, nics)
        except OSError as e:
            raise _enumeration_error(value) from e
        finally:
            close = getattr(nics, 'close', None)
            if close is not None:
                close()


def _first_match(pattern: re.Pattern[str], value: str, nics: Iterator[InterfaceDescriptor]) -> Resolved | None:
    # Names are matched first across the whole host; the listing is buffered so
    # the IP-literal check below does not need a second enumeration.
    seen: list[InterfaceDescriptor] = []
    for nic in nics:
        if pattern.fullmatch(nic.name):
            if nic.first_address is None:
                log.debug('Interface %s matched but has no address, continuing', nic.name)
                continue
            log.info('Interface %s matched, using %s', nic.name, nic.first_address)
            return Resolved(nic.first_address, interface=nic.name)
        seen.append(nic)
    return _literal_match(value, seen)


def _literal_match(value: str, nics: list[InterfaceDescriptor]) -> Resolved | None:
    try:
        literal = ipaddress.ip_address(value)
    except ValueError:
        return None
    for nic in nics:
        if literal in nic.addresses:
            log.info('Address %s on interface %s matched', literal, nic.name)
            return Resolved(literal, interface=nic.name)
    return None


def _enumeration_error(value: str) -> InterfaceEnumerationError:
    return InterfaceEnumerationError(f"Error enumerating system NIC information for config: '{CONFIG_KEY}' = '{value}'.")
