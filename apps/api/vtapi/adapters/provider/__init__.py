"""Transcoding provider adapters."""

from collections.abc import Callable

from vtapi.adapters.conductor.base import ConductorClient
from vtapi.core.config import Settings
from vtapi.errors import (
    HealthcheckError,
    InvalidProviderConfigError,
    PresetMapNotFoundError,
    ProviderError,
    ProviderNotFoundError,
)

from .base import TranscodingProvider
from .elementalconductor import NAME as ELEMENTAL_CONDUCTOR
from .elementalconductor import ElementalConductorProvider, elemental_conductor_factory

ProviderFactory = Callable[[Settings, ConductorClient], TranscodingProvider]

_PROVIDER_FACTORIES: dict[str, ProviderFactory] = {
    ELEMENTAL_CONDUCTOR: elemental_conductor_factory,
}


def get_provider_factory(name: str) -> ProviderFactory:
    factory = _PROVIDER_FACTORIES.get(name)
    if factory is None:
        raise ProviderNotFoundError(name)
    return factory


def list_providers() -> list[str]:
    return sorted(_PROVIDER_FACTORIES)


__all__ = [
    "ELEMENTAL_CONDUCTOR",
    "ElementalConductorProvider",
    "HealthcheckError",
    "InvalidProviderConfigError",
    "PresetMapNotFoundError",
    "ProviderError",
    "ProviderFactory",
    "ProviderNotFoundError",
    "TranscodingProvider",
    "elemental_conductor_factory",
    "get_provider_factory",
    "list_providers",
]
