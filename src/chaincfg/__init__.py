"""chaincfg - resolve multi-network smart-contract build and deploy configuration."""

from .assembler import (
    ContractSizerOptions,
    FinalConfig,
    VerificationKeyMap,
    assemble,
    build_config,
    select_networks,
)
from .compiler import CompilerProfile, get_compiler_profile
from .errors import (
    ConfigurationError,
    InvalidCompilerProfile,
    MissingSecret,
    MissingSigningAccount,
    UnknownNetwork,
)
from .networks import (
    DEFAULT_REGISTRY,
    NetworkDescriptor,
    NetworkRegistry,
    ResolvedNetworkConfig,
    resolve,
)
from .secrets import Secret, SecretStore

__version__ = "0.1.0"

__all__ = [
    "CompilerProfile",
    "ConfigurationError",
    "ContractSizerOptions",
    "DEFAULT_REGISTRY",
    "FinalConfig",
    "InvalidCompilerProfile",
    "MissingSecret",
    "MissingSigningAccount",
    "NetworkDescriptor",
    "NetworkRegistry",
    "ResolvedNetworkConfig",
    "Secret",
    "SecretStore",
    "UnknownNetwork",
    "VerificationKeyMap",
    "assemble",
    "build_config",
    "get_compiler_profile",
    "resolve",
    "select_networks",
]
