"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from nicmatch.l2_use_cases.ports.config_loader import ConfigLoader
from nicmatch.l2_use_cases.ports.interface_enumerator import InterfaceEnumerator
from nicmatch.l2_use_cases.ports.loopback_resolver import LoopbackResolver
from nicmatch.l2_use_cases.resolve_address_use_case import ResolveAddressUseCase
from nicmatch.l3_interface_adapters.gateways.psutil_interface_enumerator import PsutilInterfaceEnumerator
from nicmatch.l3_interface_adapters.gateways.socket_loopback_resolver import SocketLoopbackResolver
from nicmatch.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader
from nicmatch.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, infra: InfraConfig | None = None) -> None:
        self.infra = infra or InfraConfig()
        self.enumerator: InterfaceEnumerator = PsutilInterfaceEnumerator(families=self.infra.interfaces.families)
        self.loopback_resolver: LoopbackResolver = SocketLoopbackResolver(
            prefer_ipv6=self.infra.loopback.prefer_ipv6,
        )
        self.resolver = ResolveAddressUseCase(self.enumerator, self.loopback_resolver)

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()
