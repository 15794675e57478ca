"""Network catalog and resolution."""

from .registry import DEFAULT_REGISTRY, NetworkDescriptor, NetworkRegistry
from .resolver import ResolvedNetworkConfig, resolve

__all__ = [
    "DEFAULT_REGISTRY",
    "NetworkDescriptor",
    "NetworkRegistry",
    "ResolvedNetworkConfig",
    "resolve",
]
