"""Assemble the final configuration handed to downstream tooling.

Assembly is all-or-nothing: if any requested network fails to resolve, the
first error propagates and no configuration is produced. Networks that were
not requested are never resolved.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import SecretStr

from chaincfg.compiler import CompilerProfile, get_compiler_profile
from chaincfg.errors import UnknownNetwork
from chaincfg.networks.registry import DEFAULT_REGISTRY, NetworkDescriptor, NetworkRegistry
from chaincfg.networks.resolver import ResolvedNetworkConfig, resolve
from chaincfg.secrets import SecretStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContractSizerOptions:
    """Settings for the contract size analysis tool.

    Attributes
    ----------
    alpha_sort : bool
        Sort the report by contract name.
    disambiguate_paths : bool
        Print full source paths to tell apart contracts with equal names.
    run_on_compile : bool
        Run the analysis after every compilation.
    strict : bool
        Fail when a contract exceeds the deployable size limit.
    only : tuple[str, ...]
        Contract name patterns to include. Empty means all.
    ignore : tuple[str, ...]
        Contract name patterns to exclude.
    """

    alpha_sort: bool = True
    disambiguate_paths: bool = False
    run_on_compile: bool = True
    strict: bool = False
    only: tuple[str, ...] = field(default_factory=tuple)
    ignore: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "alphaSort": self.alpha_sort,
            "disambiguatePaths": self.disambiguate_paths,
            "runOnCompile": self.run_on_compile,
            "strict": self.strict,
            "only": list(self.only),
            "except": list(self.ignore),
        }


@dataclass(frozen=True)
class VerificationKeyMap:
    """Explorer identifier to API key secret name.

    Parameters
    ----------
    key_names : Mapping[str, str]
        e.g. ``{"bsc": "BSCSCAN_API_KEY"}``.
    """

    key_names: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for explorer, secret_name in self.key_names.items():
            if not explorer:
                raise ValueError("Explorer identifier must not be empty")
            if not isinstance(secret_name, str) or not secret_name:
                raise ValueError(f"Explorer {explorer!r}: API key secret name must not be empty")
        object.__setattr__(self, "key_names", MappingProxyType(dict(self.key_names)))

    def resolve(self, secrets: SecretStore) -> Mapping[str, SecretStr]:
        """Resolve every explorer to its API key.

        Unset keys resolve to an explicit empty string, which disables
        verification for that explorer. Resolution never fails.
        """
        keys: dict[str, SecretStr] = {}
        for explorer, secret_name in self.key_names.items():
            secret = secrets.get(secret_name)
            keys[explorer] = secret.value if secret.present else SecretStr("")
            if secret.empty:
                logger.info("Verification disabled for %s (%s is empty)", explorer, secret_name)
        return MappingProxyType(keys)


@dataclass(frozen=True)
class FinalConfig:
    """Immutable configuration consumed read-only by downstream tooling."""

    compiler: CompilerProfile
    networks: Mapping[str, ResolvedNetworkConfig]
    verification_keys: Mapping[str, SecretStr]
    contract_sizer: ContractSizerOptions

    def __post_init__(self):
        object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))
        object.__setattr__(
            self, "verification_keys", MappingProxyType(dict(self.verification_keys))
        )

    def network(self, name: str) -> ResolvedNetworkConfig:
        """Get a resolved network by name.

        Raises
        ------
        UnknownNetwork
            If the network was not part of this assembly.
        """
        try:
            return self.networks[name]
        except KeyError:
            raise UnknownNetwork(name) from None

    def verification_enabled(self, explorer: str) -> bool:
        key = self.verification_keys.get(explorer)
        return key is not None and bool(key.get_secret_value())

    def to_dict(self, reveal_secrets: bool = False) -> dict:
        """Render in the deployment tool's config shape.

        Parameters
        ----------
        reveal_secrets : bool
            Include raw secret values. Only for in-process handoff; never
            write the result to disk or logs.
        """

        def render(value: SecretStr) -> str:
            return value.get_secret_value() if reveal_secrets else str(value)

        return {
            "solidity": self.compiler.to_dict(),
            "networks": {
                name: network.to_dict(reveal_secrets=reveal_secrets)
                for name, network in self.networks.items()
            },
            "contractSizer": self.contract_sizer.to_dict(),
            "etherscan": {
                "apiKey": {
                    explorer: render(key) for explorer, key in self.verification_keys.items()
                }
            },
        }


def assemble(
    networks: Sequence[NetworkDescriptor],
    secrets: SecretStore,
    profile: CompilerProfile,
    verification_keys: VerificationKeyMap,
    tool_options: ContractSizerOptions,
) -> FinalConfig:
    """Resolve the requested networks and assemble the final configuration.

    Parameters
    ----------
    networks : Sequence[NetworkDescriptor]
        Requested networks, resolved in the given order.
    secrets : SecretStore
        Secret source.
    profile : CompilerProfile
        Compiler profile applied to every network.
    verification_keys : VerificationKeyMap
        Explorer API key references.
    tool_options : ContractSizerOptions
        Contract size analysis settings.

    Returns
    -------
    FinalConfig
        The assembled configuration.

    Raises
    ------
    ConfigurationError
        The first resolution failure. No partial configuration is returned.
    """
    resolved: dict[str, ResolvedNetworkConfig] = {}
    for descriptor in networks:
        resolved[descriptor.name] = resolve(descriptor, secrets)

    config = FinalConfig(
        compiler=profile,
        networks=resolved,
        verification_keys=verification_keys.resolve(secrets),
        contract_sizer=tool_options,
    )
    logger.info(
        "Assembled configuration for %s (solc %s)",
        ", ".join(resolved) or "no networks",
        profile.version,
    )
    return config


def select_networks(
    names: Iterable[str],
    registry: NetworkRegistry = DEFAULT_REGISTRY,
) -> list[NetworkDescriptor]:
    """Look up requested networks, deduplicated and in registry order.

    Every name is checked before anything is resolved, so an unknown name
    fails the invocation without touching secrets.

    Raises
    ------
    UnknownNetwork
        If any name is not registered.
    """
    requested = {registry.get(name).name for name in names}
    return [descriptor for descriptor in registry if descriptor.name in requested]


def build_config(
    names: Iterable[str],
    secrets: SecretStore,
    registry: NetworkRegistry = DEFAULT_REGISTRY,
    profile: CompilerProfile | None = None,
    verification_keys: VerificationKeyMap | None = None,
    tool_options: ContractSizerOptions | None = None,
) -> FinalConfig:
    """Select networks by name and assemble them.

    Defaults are the process-wide compiler profile, no verification keys and
    default contract sizer options. The compiler profile is checked before any
    network is looked up.
    """
    if profile is None:
        profile = get_compiler_profile()
    return assemble(
        select_networks(names, registry),
        secrets,
        profile,
        verification_keys or VerificationKeyMap(),
        tool_options or ContractSizerOptions(),
    )
