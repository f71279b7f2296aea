"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from collections.abc import Iterator
from ipaddress import ip_address
from pathlib import Path

import pytest

from nicmatch.l1_entities.errors import InterfaceEnumerationError, LoopbackResolutionError
from nicmatch.l1_entities.interface import Address, InterfaceDescriptor

LOOPBACK = ip_address('127.0.0.1')

# --- Protocol-conforming Fakes ---


def nic(name: str, *addresses: str) -> InterfaceDescriptor:
    return InterfaceDescriptor(name=name, addresses=tuple(ip_address(a) for a in addresses))


class FakeInterfaceEnumerator:
    """Fake enumerator for L2 use case tests. Yields from a generator so closing can be observed."""

    def __init__(
        self,
        nics: list[InterfaceDescriptor] | None = None,
        error: Exception | None = None,
        fail_after: int | None = None,
    ) -> None:
        self._nics = list(nics or [])
        self._error = error
        self._fail_after = fail_after
        self.calls = 0
        self.yielded: list[str] = []
        self.closed = 0

    def interfaces(self) -> Iterator[InterfaceDescriptor]:
        self.calls += 1
        if self._error is not None and self._fail_after is None:
            raise self._error
        return self._generate()

    def _generate(self) -> Iterator[InterfaceDescriptor]:
        try:
            for i, item in enumerate(self._nics):
                if self._fail_after is not None and i == self._fail_after:
                    raise self._error or InterfaceEnumerationError('enumeration broke')
                self.yielded.append(item.name)
                yield item
            if self._fail_after is not None and self._fail_after >= len(self._nics):
                raise self._error or InterfaceEnumerationError('enumeration broke')
        finally:
            self.closed += 1


class FakeLoopbackResolver:
    """Fake loopback resolver for L2 use case tests."""

    def __init__(self, address: Address = LOOPBACK, error: Exception | None = None) -> None:
        self._address = address
        self._error = error
        self.calls = 0

    def loopback(self) -> Address:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._address


# --- Standard Fixtures ---


@pytest.fixture
def host_nics() -> list[InterfaceDescriptor]:
    return [
        nic('lo', '127.0.0.1', '::1'),
        nic('eth0', '10.0.0.5', 'fe80::1'),
        nic('eth1', '192.168.1.5'),
        nic('docker0'),
    ]


@pytest.fixture
def fake_enumerator(host_nics: list[InterfaceDescriptor]) -> FakeInterfaceEnumerator:
    return FakeInterfaceEnumerator(host_nics)


@pytest.fixture
def fake_loopback() -> FakeLoopbackResolver:
    return FakeLoopbackResolver()


@pytest.fixture
def failing_loopback() -> FakeLoopbackResolver:
    return FakeLoopbackResolver(error=LoopbackResolutionError('Can not lookup loopback interface'))


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
nicmatch: "eth.*"
port: 8778
debug: true
interfaces:
  families: [ipv4]
loopback:
  prefer_ipv6: false
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
