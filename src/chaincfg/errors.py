"""Configuration errors raised during network resolution and assembly.

Every error carries the offending identifier (network name, secret name or
compiler version) and never a secret value. None of them are retried.
"""


class ConfigurationError(Exception):
    """Base class for all resolution and assembly failures."""


class UnknownNetwork(ConfigurationError):
    """Requested network name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown network: {name!r}")


class MissingSecret(ConfigurationError):
    """A required secret is not set, or is set to an empty string."""

    def __init__(self, secret_name: str, network: str | None = None, empty: bool = False):
        self.secret_name = secret_name
        self.network = network
        self.empty = empty
        state = "is empty" if empty else "is not set"
        message = f"Missing secret {secret_name}: environment variable {state}"
        if network:
            message += f" (required by network {network!r})"
        super().__init__(message)


class MissingSigningAccount(ConfigurationError):
    """A non-local network declares no signing accounts."""

    def __init__(self, network: str):
        self.network = network
        super().__init__(f"Network {network!r} declares no signing accounts")


class InvalidCompilerProfile(ConfigurationError):
    """Compiler version string is empty or malformed."""

    def __init__(self, version: str, reason: str = "malformed version"):
        self.version = version
        super().__init__(f"Invalid compiler version {version!r}: {reason}")
