"""Process-wide secret access.

Secrets (signing keys, RPC URLs, explorer API keys) come from the process
environment, with an optional ``.env`` file as a fallback source. Real
environment variables take precedence over file values.

Values are wrapped in ``SecretStr`` as soon as they are read and are never
passed to a logger.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values
from pydantic import SecretStr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Secret:
    """A named secret value with an explicit presence flag.

    Attributes
    ----------
    name : str
        Environment variable name.
    value : SecretStr | None
        The raw value, or None when the variable is not set.
    """

    name: str
    value: SecretStr | None = field(default=None, repr=False)

    @property
    def present(self) -> bool:
        """True when the variable is set, even to an empty string."""
        return self.value is not None

    @property
    def empty(self) -> bool:
        """True when the variable is unset or set to an empty string."""
        return self.value is None or self.value.get_secret_value() == ""

    def __repr__(self) -> str:
        return f"Secret(name={self.name!r}, present={self.present})"


class SecretStore:
    """Read-once, cached view over environment secrets.

    Parameters
    ----------
    environ : Mapping[str, str] | None
        Source mapping. Defaults to ``os.environ``.
    env_file : str | Path | None
        Optional dotenv file consulted for names missing from ``environ``.
        A missing file is not an error.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        env_file: str | Path | None = None,
    ):
        self._environ = os.environ if environ is None else environ
        self._env_file = Path(env_file).expanduser() if env_file else None
        self._file_values: dict[str, str | None] | None = None
        self._cache: dict[str, Secret] = {}

    def _load_file_values(self) -> dict[str, str | None]:
        if self._file_values is None:
            if self._env_file is not None and self._env_file.is_file():
                self._file_values = dict(dotenv_values(self._env_file))
                logger.debug(
                    "Loaded %d entries from env file %s", len(self._file_values), self._env_file
                )
            else:
                self._file_values = {}
        return self._file_values

    def get(self, name: str) -> Secret:
        """Get a secret by name.

        Parameters
        ----------
        name : str
            Environment variable name.

        Returns
        -------
        Secret
            The secret. ``present`` is False when the name is undefined.
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        raw = self._environ.get(name)
        if raw is None:
            raw = self._load_file_values().get(name)

        secret = Secret(name=name, value=SecretStr(raw) if raw is not None else None)
        self._cache[name] = secret
        logger.debug("Secret %s read (present=%s)", name, secret.present)
        return secret
