"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m merkle_cli tree [LEAF ...] [--file PATH] [--json]
    python -m merkle_cli root [LEAF ...] [--file PATH] [--json]
    python -m merkle_cli proof TARGET [LEAF ...] [--file PATH] [--index N] [--json]
    python -m merkle_cli verify --proof PATH [--root HEX] [--json]
    python -m merkle_cli config --init

Environment Variables:
    MERKLE_HASH_ALGORITHM       Digest algorithm (default: sha256)
    MERKLE_LOG_LEVEL            Log level (default: INFO)
    MERKLE_LOG_FILE             Optional log file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from core.config.runtime import RuntimeConfig, get_default_config_template
from core.crypto.hashing import SUPPORTED_ALGORITHMS
from core.schemas.errors import MerkleException
from merkle_cli.commands import tree, root, proof, verify


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


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
        force=True,
    )


def _add_common_arguments(parser: argparse.ArgumentParser, with_leaves: bool = True) -> None:
    if with_leaves:
        parser.add_argument(
            "--file", "-f",
            type=str,
            default=None,
            help="File with one leaf hash per line ('-' for stdin)",
        )
    parser.add_argument(
        "--algorithm", "-a",
        type=str,
        default=None,
        choices=sorted(SUPPORTED_ALGORITHMS),
        help="Digest algorithm (default: from config, sha256)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on error",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkle",
        description="Merkle CLI - Build Merkle trees, roots and inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./merkle.json or ~/.config/merkle/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- tree command ---
    tree_parser = subparsers.add_parser(
        "tree",
        help="Print every level of the Merkle tree",
        description="Build the full tree over the given leaves.",
    )
    tree_parser.add_argument("leaves", nargs="*", help="Leaf hashes")
    _add_common_arguments(tree_parser)
    tree_parser.set_defaults(func=tree.tree_cmd)

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Print the Merkle root",
        description="Compute the root over the given leaves.",
    )
    root_parser.add_argument("leaves", nargs="*", help="Leaf hashes")
    _add_common_arguments(root_parser)
    root_parser.set_defaults(func=root.root_cmd)

    # --- proof command ---
    proof_parser = subparsers.add_parser(
        "proof",
        help="Print an inclusion proof for one leaf",
        description="Generate the authentication path for a leaf, by value or by --index.",
    )
    proof_parser.add_argument("target", nargs="?", default=None, help="Leaf hash to prove")
    proof_parser.add_argument("leaves", nargs="*", help="Leaf hashes")
    proof_parser.add_argument(
        "--index", "-i",
        type=int,
        default=None,
        help="Prove the leaf at this position instead of looking up TARGET",
    )
    _add_common_arguments(proof_parser)
    proof_parser.set_defaults(func=proof.proof_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify an inclusion proof against a root",
        description="Recombine a proof file and compare it with a trusted root.",
    )
    verify_parser.add_argument(
        "--proof", "-p",
        type=str,
        required=True,
        help="JSON proof file (envelope or node list)",
    )
    verify_parser.add_argument(
        "--root", "-r",
        type=str,
        default=None,
        help="Trusted root (default: root embedded in the proof file)",
    )
    _add_common_arguments(verify_parser, with_leaves=False)
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="merkle.json",
        help="Path for config file (default: merkle.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (MERKLE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: merkle config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


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

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = RuntimeConfig.load(args.config)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except MerkleException as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
