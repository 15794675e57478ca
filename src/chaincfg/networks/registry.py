"""Static catalog of supported networks.

The network set is fixed per deployment. Descriptors only name the secrets
they need; values are looked up at resolution time.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from types import MappingProxyType

from chaincfg.errors import UnknownNetwork


@dataclass(frozen=True)
class NetworkDescriptor:
    """Static description of a target network.

    Attributes
    ----------
    name : str
        Unique network key, e.g. ``bsc``.
    chain_id : int | None
        Expected chain ID, or None when left unset.
    url_secret_name : str | None
        Name of the secret holding the RPC URL. None only for local networks.
    account_secret_names : tuple[str, ...]
        Ordered names of the secrets holding signing keys.
    logging_enabled : bool
        Whether the node should log RPC traffic.
    is_local : bool
        Local development chain that uses the tool's built-in accounts.
    """

    name: str
    chain_id: int | None = None
    url_secret_name: str | None = None
    account_secret_names: tuple[str, ...] = field(default_factory=tuple)
    logging_enabled: bool = False
    is_local: bool = False

    def __post_init__(self):
        if not self.name:
            raise ValueError("Network name must not be empty")
        if self.chain_id is not None and self.chain_id <= 0:
            raise ValueError(
                f"Network {self.name!r}: chain_id must be positive, got {self.chain_id}"
            )
        if not self.is_local and not self.url_secret_name:
            raise ValueError(f"Network {self.name!r}: non-local networks need a url_secret_name")
        # Accept any iterable of names but store a tuple
        object.__setattr__(self, "account_secret_names", tuple(self.account_secret_names))


class NetworkRegistry:
    """Immutable, ordered mapping of network name to descriptor.

    Parameters
    ----------
    descriptors : Iterable[NetworkDescriptor]
        Descriptors in declaration order.

    Raises
    ------
    ValueError
        If two descriptors share a name.
    """

    def __init__(self, descriptors: Iterable[NetworkDescriptor]):
        networks: dict[str, NetworkDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in networks:
                raise ValueError(f"Duplicate network name: {descriptor.name!r}")
            networks[descriptor.name] = descriptor
        self._networks = MappingProxyType(networks)

    def list_networks(self) -> tuple[NetworkDescriptor, ...]:
        """Return all descriptors in declaration order."""
        return tuple(self._networks.values())

    def get(self, name: str) -> NetworkDescriptor:
        """Look up a descriptor by name.

        Raises
        ------
        UnknownNetwork
            If no network with that name is registered.
        """
        try:
            return self._networks[name]
        except KeyError:
            raise UnknownNetwork(name) from None

    def names(self) -> tuple[str, ...]:
        return tuple(self._networks)

    def __contains__(self, name: object) -> bool:
        return name in self._networks

    def __iter__(self) -> Iterator[NetworkDescriptor]:
        return iter(self._networks.values())

    def __len__(self) -> int:
        return len(self._networks)


PRIVATE_KEY = "PRIVATE_KEY"

DEFAULT_REGISTRY = NetworkRegistry(
    [
        # Local node; the tool supplies its own 20 funded test accounts
        NetworkDescriptor(
            name="hardhat",
            chain_id=1337,
            logging_enabled=True,
            is_local=True,
        ),
        NetworkDescriptor(
            name="bsc",
            chain_id=56,
            url_secret_name="BSC_RPC_URL",
            account_secret_names=(PRIVATE_KEY,),
        ),
        NetworkDescriptor(
            name="bscTestnet",
            chain_id=97,
            url_secret_name="BSC_TESTNET_RPC_URL",
            account_secret_names=(PRIVATE_KEY,),
        ),
    ]
)
