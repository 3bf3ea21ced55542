"""
Command-line lookup: print the Mango accounts with trade logs for an address.

    mangologs <address> [--json] [--rpc-url URL] [--index-url URL] [--timeout SEC] [--log-level LEVEL]

Exit codes: 0 resolved (possibly zero accounts), 1 network failure,
2 invalid address or option, 3 invalid environment configuration.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys

from mangologs.config.settings import get_settings
from mangologs.core.exceptions import ResolveError
from mangologs.mangologs_logging import configure_logging, get_logger
from mangologs.resolver.resolver import ResolutionStatus, Resolver
from mangologs.utils.wallet_utils import shorten_address

logger = get_logger("mangologs.cli")

EXIT_OK = 0
EXIT_TRANSPORT = 1
EXIT_INVALID = 2
EXIT_CONFIG = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mangologs",
        description="List Mango Markets accounts with downloadable trade logs for a wallet or Mango account",
    )
    parser.add_argument("address", help="Wallet or Mango account pubkey (base58)")
    parser.add_argument("--json", action="store_true", help="Print a JSON document instead of one id per line")
    parser.add_argument("--rpc-url", help="Solana RPC endpoint (default: SOLANA_RPC_URL or ankr)")
    parser.add_argument("--index-url", help="Log index endpoint (default: MANGO_LOG_INDEX_URL)")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds for both endpoints")
    parser.add_argument(
        "--log-level",
        choices=("debug", "info", "warning", "error"),
        help="Log verbosity on stderr (default: LOG_LEVEL or info)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG

    overrides: dict[str, object] = {}
    if args.rpc_url:
        overrides["solana_rpc_url"] = args.rpc_url
    if args.index_url:
        overrides["log_index_url"] = args.index_url
    if args.timeout is not None:
        if args.timeout <= 0:
            print("ERROR: --timeout must be positive", file=sys.stderr)
            return EXIT_INVALID
        overrides["rpc_timeout_sec"] = args.timeout
        overrides["index_timeout_sec"] = args.timeout
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    resolver = Resolver.from_settings(settings)
    try:
        resolution = resolver.resolve_detailed(args.address)
    except ResolveError as e:
        logger.error("cli_resolve_failed", address=args.address, error=str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_TRANSPORT
    finally:
        resolver.close()

    if resolution.status is ResolutionStatus.INVALID_ADDRESS:
        print("ERROR: Enter a valid address to show available logs.", file=sys.stderr)
        return EXIT_INVALID

    if args.json:
        print(json.dumps({
            "address": resolution.address,
            "wallet": resolution.wallet,
            "owner_class": resolution.owner_class.value if resolution.owner_class else None,
            "status": resolution.status.value,
            "accounts": resolution.accounts,
        }))
    else:
        print(f"Found {len(resolution.accounts)} logs for {shorten_address(resolution.address)}", file=sys.stderr)
        for account in resolution.accounts:
            print(account)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
