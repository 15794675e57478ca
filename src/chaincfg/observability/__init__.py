"""Observability module for chaincfg."""

from .logging import clear_run_id, configure_logging, set_run_id

__all__ = [
    "clear_run_id",
    "configure_logging",
    "set_run_id",
]
