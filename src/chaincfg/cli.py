"""CLI subcommands for chaincfg.

Provides command-line interface for:
- Listing the network registry (networks)
- Resolving and assembling configuration for target networks (resolve)
- Showing the compiler profile (compiler)

Secret values are never printed. RPC URLs are masked and signing keys are
shown as the address they control.
"""

import argparse
import json
import logging
import sys
import uuid

from pydantic import ValidationError

from chaincfg.assembler import FinalConfig, VerificationKeyMap, assemble, select_networks
from chaincfg.compiler import get_compiler_profile
from chaincfg.config import ChainCfgSettings
from chaincfg.errors import (
    ConfigurationError,
    InvalidCompilerProfile,
    MissingSecret,
    MissingSigningAccount,
    UnknownNetwork,
)
from chaincfg.networks.registry import DEFAULT_REGISTRY, NetworkRegistry
from chaincfg.observability.logging import clear_run_id, configure_logging, set_run_id
from chaincfg.secrets import SecretStore
from chaincfg.signers import signer_addresses

logger = logging.getLogger(__name__)

INVALID_KEY = "<invalid key>"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="chaincfg",
        description="chaincfg - resolve multi-network contract build and deploy configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Global flags
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )
    parser.add_argument(
        "--env-file",
        metavar="FILE",
        help="Read secrets missing from the environment from FILE (default: .env)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("networks", help="List known networks")
    subparsers.add_parser("compiler", help="Show the compiler profile")

    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve and assemble configuration for networks"
    )
    resolve_parser.add_argument("networks", nargs="*", metavar="NETWORK", help="Network name")
    resolve_parser.add_argument(
        "--all",
        action="store_true",
        dest="all_networks",
        help="Resolve every registered network",
    )

    return parser


class CLIContext:
    """Shared context for CLI commands."""

    def __init__(
        self,
        settings: ChainCfgSettings,
        registry: NetworkRegistry = DEFAULT_REGISTRY,
        env_file: str | None = None,
        json_output: bool = False,
    ):
        self.settings = settings
        self.registry = registry
        self.env_file = env_file if env_file is not None else settings.secrets_env_file
        self.json_output = json_output
        self._secrets: SecretStore | None = None

    @property
    def secrets(self) -> SecretStore:
        """Get secret store (lazy loaded)."""
        if self._secrets is None:
            self._secrets = SecretStore(env_file=self.env_file)
        return self._secrets

    def output(self, data: dict) -> None:
        """Output data in the appropriate format."""
        if self.json_output:
            print(json.dumps(data, indent=2))
        else:
            self._print_formatted(data)

    def error(self, exc: Exception) -> None:
        """Report an error on stderr, naming the offending identifier."""
        payload = error_payload(exc)
        if self.json_output:
            print(json.dumps(payload), file=sys.stderr)
        else:
            print(f"Error: {payload['error']}", file=sys.stderr)

    def _print_formatted(self, data: dict, indent: int = 0) -> None:
        """Print data in human-readable format."""
        prefix = "  " * indent
        for key, value in data.items():
            if isinstance(value, dict):
                print(f"{prefix}{key}:")
                self._print_formatted(value, indent + 1)
            elif isinstance(value, list):
                print(f"{prefix}{key}: {', '.join(str(v) for v in value) or '-'}")
            else:
                print(f"{prefix}{key}: {value}")


def error_payload(exc: Exception) -> dict:
    """Build an error report. Only identifiers are included, never values."""
    payload: dict = {"error": str(exc), "type": type(exc).__name__}
    if isinstance(exc, UnknownNetwork):
        payload["network"] = exc.name
    elif isinstance(exc, MissingSecret):
        payload["secret"] = exc.secret_name
        if exc.network:
            payload["network"] = exc.network
    elif isinstance(exc, MissingSigningAccount):
        payload["network"] = exc.network
    elif isinstance(exc, InvalidCompilerProfile):
        payload["compiler_version"] = exc.version
    return payload


def summarize(config: FinalConfig) -> dict:
    """Render a FinalConfig for display, with secrets masked."""
    networks = {}
    for name, network in config.networks.items():
        signers = [address or INVALID_KEY for address in signer_addresses(network.accounts)]
        networks[name] = {
            "chain_id": network.chain_id,
            "local": network.is_local,
            "url": str(network.url) if network.url is not None else None,
            "signers": signers,
        }
    return {
        "compiler": config.compiler.to_dict(),
        "networks": networks,
        "verification": {
            explorer: "enabled" if config.verification_enabled(explorer) else "disabled"
            for explorer in config.verification_keys
        },
        "contract_sizer": config.contract_sizer.to_dict(),
    }


def cmd_networks(ctx: CLIContext) -> int:
    """List known networks."""
    ctx.output(
        {
            descriptor.name: {
                "chain_id": descriptor.chain_id,
                "local": descriptor.is_local,
                "url_secret": descriptor.url_secret_name,
                "account_secrets": list(descriptor.account_secret_names),
            }
            for descriptor in ctx.registry
        }
    )
    return 0


def cmd_compiler(ctx: CLIContext) -> int:
    """Show the compiler profile."""
    try:
        ctx.output(get_compiler_profile().to_dict())
        return 0
    except ConfigurationError as e:
        ctx.error(e)
        return 1


def cmd_resolve(ctx: CLIContext, names: list[str], all_networks: bool = False) -> int:
    """Resolve and assemble configuration for the requested networks."""
    if all_networks:
        names = list(ctx.registry.names())
    if not names:
        print("Usage: chaincfg resolve NETWORK [NETWORK ...] | --all", file=sys.stderr)
        return 1

    try:
        # Compiler profile is validated before any network is touched
        profile = get_compiler_profile()
        descriptors = select_networks(names, ctx.registry)
        config = assemble(
            descriptors,
            ctx.secrets,
            profile,
            VerificationKeyMap(ctx.settings.verification_keys),
            ctx.settings.contract_sizer_options(),
        )
    except (ConfigurationError, ValueError) as e:
        logger.error("Resolution failed: %s", e)
        ctx.error(e)
        return 1

    logger.info("Resolved %d network(s): %s", len(config.networks), ", ".join(config.networks))
    ctx.output(summarize(config))
    return 0


def run_cli(args: argparse.Namespace) -> int:
    """Execute CLI command based on parsed arguments.

    Returns
    -------
    int
        Exit code: 0 for success, positive for error, -1 signals caller
        to show help (no CLI command specified).
    """
    # Load settings and set up logging
    try:
        settings = ChainCfgSettings()
        configure_logging(level=settings.log_level, log_format=settings.log_format.value)
    except (ValidationError, ValueError) as e:
        if args.json:
            print(json.dumps({"error": f"Configuration error: {e}"}), file=sys.stderr)
        else:
            print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    set_run_id(uuid.uuid4().hex[:12])
    ctx = CLIContext(settings, env_file=args.env_file, json_output=args.json)

    try:
        if args.command == "networks":
            return cmd_networks(ctx)
        elif args.command == "compiler":
            return cmd_compiler(ctx)
        elif args.command == "resolve":
            return cmd_resolve(ctx, args.networks, all_networks=args.all_networks)
        else:
            # No subcommand - show help
            return -1
    finally:
        clear_run_id()
