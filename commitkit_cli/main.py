"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m commitkit_cli merkle root ITEM... [--json]
    python -m commitkit_cli merkle prove --index N ITEM... [--json]
    python -m commitkit_cli sparse insert KEY_HEX VALUE [--json]
    python -m commitkit_cli mmr append [--bag-size K] ITEM... [--json]

Environment Variables:
    COMMITKIT_MMR_BAG_SIZE      Default MMR bagging window (default: 2)
    COMMITKIT_LOG_LEVEL         Log level (default: INFO)
    COMMITKIT_LOG_FILE          Optional log file
    COMMITKIT_OUTPUT_JSON       Emit JSON by default (true/false)
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from commitkit.config import RuntimeConfig
from commitkit_cli.commands import merkle, sparse, mmr
from commitkit_cli.commands.output import EXIT_RUNTIME_ERROR


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from a YAML file and/or environment.

    Environment variables override file settings.
    """
    if config_path is not None:
        return RuntimeConfig.from_yaml(config_path).with_env_overrides()
    return RuntimeConfig.from_env()


def _add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="commitkit",
        description="commitkit CLI - Build Merkle commitments and check proofs.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks for unexpected errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- merkle command group ---
    merkle_parser = subparsers.add_parser(
        "merkle",
        help="Binary Merkle tree over a batch of items",
    )
    merkle_sub = merkle_parser.add_subparsers(dest="merkle_command")

    root_parser = merkle_sub.add_parser("root", help="Print the Merkle root of the items")
    root_parser.add_argument("items", nargs="+", help="Items (UTF-8 text)")
    _add_json_flag(root_parser)
    root_parser.set_defaults(func=merkle.root_cmd)

    prove_parser = merkle_sub.add_parser(
        "prove",
        help="Generate and check an inclusion proof",
    )
    prove_parser.add_argument(
        "--index", "-i",
        type=int,
        required=True,
        help="0-based index of the item to prove",
    )
    prove_parser.add_argument("items", nargs="+", help="Items (UTF-8 text)")
    _add_json_flag(prove_parser)
    prove_parser.set_defaults(func=merkle.prove_cmd)

    # --- sparse command group ---
    sparse_parser = subparsers.add_parser(
        "sparse",
        help="Sparse Merkle tree keyed by 16-byte keys",
    )
    sparse_sub = sparse_parser.add_subparsers(dest="sparse_command")

    insert_parser = sparse_sub.add_parser(
        "insert",
        help="Insert one key/value into a fresh tree and print the root",
    )
    insert_parser.add_argument("key", help="16-byte key as 0x-prefixed hex")
    insert_parser.add_argument("value", help="Value (UTF-8 text)")
    _add_json_flag(insert_parser)
    insert_parser.set_defaults(func=sparse.insert_cmd)

    # --- mmr command group ---
    mmr_parser = subparsers.add_parser(
        "mmr",
        help="Append-only Merkle mountain range",
    )
    mmr_sub = mmr_parser.add_subparsers(dest="mmr_command")

    append_parser = mmr_sub.add_parser(
        "append",
        help="Append items to a fresh mountain range and print peaks and root",
    )
    append_parser.add_argument(
        "--bag-size", "-b",
        type=int,
        default=None,
        help="Peak bagging window (default: from config, 2)",
    )
    append_parser.add_argument("items", nargs="*", help="Items (UTF-8 text)")
    _add_json_flag(append_parser)
    append_parser.set_defaults(func=mmr.append_cmd)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if getattr(args, "func", None) is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    args.runtime_config = config
    args.json = args.json or config.output.json

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
