"""Infrastructure settings for the gateways — lives in L4, not domain."""

from __future__ import annotations

import copy
from typing import Literal

from pydantic import BaseModel, Field

INFRA_CONFIG_DEFAULTS: dict = {
    'interfaces': {
        'families': ['ipv4', 'ipv6'],
    },
    'loopback': {
        'prefer_ipv6': False,
    },
}


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


class InterfacesConfig(BaseModel):
    families: list[Literal['ipv4', 'ipv6']] = Field(default_factory=lambda: ['ipv4', 'ipv6'], min_length=1)


class LoopbackConfig(BaseModel):
    prefer_ipv6: bool = False


class InfraConfig(BaseModel):
    """Groups all gateway-specific settings outside the domain layer."""

    interfaces: InterfacesConfig = Field(default_factory=InterfacesConfig)
    loopback: LoopbackConfig = Field(default_factory=LoopbackConfig)


def build_infra_config(raw: dict) -> InfraConfig:
    """Merge *raw* user settings on top of defaults, then validate."""
    merged = copy.deepcopy(INFRA_CONFIG_DEFAULTS)
    deep_merge(merged, {k: v for k, v in raw.items() if k in INFRA_CONFIG_DEFAULTS})
    return InfraConfig.model_validate(merged)
