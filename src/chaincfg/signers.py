"""Signer address derivation for display.

Signing keys are never printed. Operators see the address a key controls
instead, which is enough to tell whether the intended deployer is configured.
"""

from eth_account import Account
from pydantic import SecretStr


def signer_address(private_key: SecretStr) -> str | None:
    """Derive the checksummed address for a signing key.

    Parameters
    ----------
    private_key : SecretStr
        The signing key.

    Returns
    -------
    str | None
        The address, or None if the key is not a valid secp256k1 private key.
    """
    try:
        return Account.from_key(private_key.get_secret_value()).address
    except (ValueError, TypeError):
        return None


def signer_addresses(private_keys: tuple[SecretStr, ...]) -> list[str | None]:
    """Derive addresses for several keys, preserving order."""
    return [signer_address(key) for key in private_keys]
