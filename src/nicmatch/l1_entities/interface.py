"""Network interface entity."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address

from pydantic import BaseModel, ConfigDict

Address = IPv4Address | IPv6Address


class InterfaceDescriptor(BaseModel):
    """One host network interface and its assigned addresses, in host order."""

    model_config = ConfigDict(frozen=True)

    name: str
    addresses: tuple[Address, ...] = ()

    @property
    def first_address(self) -> Address | None:
        return self.addresses[0] if self.addresses else None
