"""Merge network descriptors with live secret values.

Resolution fails fast and names the exact missing secret. There is no
fallback to an empty URL or a zero-value signing key.
"""

import logging
from dataclasses import dataclass, field

from pydantic import SecretStr

from chaincfg.errors import MissingSecret, MissingSigningAccount
from chaincfg.networks.registry import NetworkDescriptor
from chaincfg.secrets import Secret, SecretStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedNetworkConfig:
    """Network configuration ready for a deployment client.

    Attributes
    ----------
    name : str
        Network name.
    chain_id : int | None
        Chain ID copied from the descriptor.
    url : SecretStr | None
        RPC endpoint. None for local networks.
    accounts : tuple[SecretStr, ...]
        Signing keys in descriptor order. Empty for local networks.
    is_local : bool
        Whether the network is a local development chain.
    logging_enabled : bool
        Whether the node should log RPC traffic.
    """

    name: str
    chain_id: int | None
    url: SecretStr | None = None
    accounts: tuple[SecretStr, ...] = field(default_factory=tuple)
    is_local: bool = False
    logging_enabled: bool = False

    def __post_init__(self):
        object.__setattr__(self, "accounts", tuple(self.accounts))

    def to_dict(self, reveal_secrets: bool = False) -> dict:
        """Render as a plain dict in the deployment tool's network shape.

        Secrets are masked unless ``reveal_secrets`` is set.
        """

        def render(value: SecretStr) -> str:
            return value.get_secret_value() if reveal_secrets else str(value)

        result: dict = {}
        if self.chain_id is not None:
            result["chainId"] = self.chain_id
        if self.logging_enabled:
            result["loggingEnabled"] = True
        if self.url is not None:
            result["url"] = render(self.url)
        if not self.is_local:
            result["accounts"] = [render(account) for account in self.accounts]
        return result


def _require(secret: Secret, network: str) -> SecretStr:
    if not secret.present:
        raise MissingSecret(secret.name, network=network)
    if secret.empty:
        raise MissingSecret(secret.name, network=network, empty=True)
    return secret.value


def resolve(descriptor: NetworkDescriptor, secrets: SecretStore) -> ResolvedNetworkConfig:
    """Resolve a single network.

    Parameters
    ----------
    descriptor : NetworkDescriptor
        Static network description.
    secrets : SecretStore
        Source of URL and signing key values.

    Returns
    -------
    ResolvedNetworkConfig
        The resolved configuration.

    Raises
    ------
    MissingSecret
        If the URL secret or any account secret is unset or empty.
    MissingSigningAccount
        If a non-local network declares no accounts.
    """
    if descriptor.is_local:
        logger.debug("Network %s is local, skipping secret lookup", descriptor.name)
        return ResolvedNetworkConfig(
            name=descriptor.name,
            chain_id=descriptor.chain_id,
            is_local=True,
            logging_enabled=descriptor.logging_enabled,
        )

    url = _require(secrets.get(descriptor.url_secret_name), descriptor.name)

    if not descriptor.account_secret_names:
        raise MissingSigningAccount(descriptor.name)
    accounts = tuple(
        _require(secrets.get(secret_name), descriptor.name)
        for secret_name in descriptor.account_secret_names
    )

    logger.debug("Resolved network %s with %d account(s)", descriptor.name, len(accounts))
    return ResolvedNetworkConfig(
        name=descriptor.name,
        chain_id=descriptor.chain_id,
        url=url,
        accounts=accounts,
        is_local=False,
        logging_enabled=descriptor.logging_enabled,
    )
