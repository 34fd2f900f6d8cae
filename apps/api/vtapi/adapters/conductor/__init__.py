"""Elemental Conductor client adapters."""

from .base import ConductorClient, ConductorClientError
from .memory_client import InMemoryConductorClient

__all__ = [
    "ConductorClient",
    "ConductorClientError",
    "InMemoryConductorClient",
]
