#!/usr/bin/env python3
"""chaincfg - multi-network contract build and deploy configuration.

Entry point for the chaincfg command.
"""

import sys

from chaincfg.cli import create_parser, run_cli


def parse_args(argv: list[str] | None = None):
    """Parse command line arguments."""
    return create_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for chaincfg."""
    args = parse_args(argv)

    exit_code = run_cli(args)
    if exit_code >= 0:
        sys.exit(exit_code)
    # exit_code < 0 means no subcommand was given
    create_parser().print_help()
    sys.exit(0)


if __name__ == "__main__":
    main()
