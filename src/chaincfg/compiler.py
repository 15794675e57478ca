"""Solidity compiler profile shared by every network."""

import re
from dataclasses import dataclass
from functools import lru_cache

from chaincfg.errors import InvalidCompilerProfile

# major.minor.patch, optionally followed by a commit suffix like +commit.27d51765
VERSION_PATTERN = re.compile(r"\d+\.\d+\.\d+(\+commit\.[0-9a-f]{8})?")


@dataclass(frozen=True)
class CompilerProfile:
    """Compiler version and optimizer settings.

    Raises
    ------
    InvalidCompilerProfile
        If the version string is empty or malformed.
    """

    version: str
    optimizer_enabled: bool = False
    optimizer_runs: int = 200
    evm_version: str | None = None

    def __post_init__(self):
        if not self.version or not self.version.strip():
            raise InvalidCompilerProfile(self.version, "version must not be empty")
        if not VERSION_PATTERN.fullmatch(self.version):
            raise InvalidCompilerProfile(self.version)
        if self.optimizer_runs < 1:
            raise InvalidCompilerProfile(
                self.version, f"optimizer runs must be positive, got {self.optimizer_runs}"
            )

    def to_dict(self) -> dict:
        settings: dict = {
            "optimizer": {"enabled": self.optimizer_enabled, "runs": self.optimizer_runs},
        }
        if self.evm_version:
            settings["evmVersion"] = self.evm_version
        return {"version": self.version, "settings": settings}


SOLC_VERSION = "0.6.12"


@lru_cache(maxsize=1)
def get_compiler_profile() -> CompilerProfile:
    """Return the compiler profile applied to all networks.

    Built and validated on first call, which happens before any network is
    resolved.

    Raises
    ------
    InvalidCompilerProfile
        If the configured version is empty or malformed.
    """
    return CompilerProfile(version=SOLC_VERSION)
