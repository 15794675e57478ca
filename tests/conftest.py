"""Pytest configuration and fixtures for chaincfg tests."""

import logging
import os

import pytest
import structlog

from chaincfg.compiler import get_compiler_profile
from chaincfg.secrets import SecretStore

SECRET_NAMES = (
    "PRIVATE_KEY",
    "BSC_RPC_URL",
    "BSC_TESTNET_RPC_URL",
    "BSCSCAN_API_KEY",
    "POLYGONSCAN_API_KEY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Clear chaincfg-related environment variables and isolate from any .env file."""
    for key in list(os.environ.keys()):
        if key.startswith("CHAINCFG_") or key in SECRET_NAMES:
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_compiler_profile.cache_clear()
    root = logging.getLogger()
    level = root.level
    yield
    # Drop handlers installed by configure_logging
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    get_compiler_profile.cache_clear()


@pytest.fixture
def make_store():
    """Build a SecretStore over a plain dict."""

    def _make(**values: str) -> SecretStore:
        return SecretStore(environ=dict(values))

    return _make
