"""
CLI Root Command

Compute and print the Merkle root of a leaf set.

Usage:
    merkle root <leaf> <leaf> ... [--file PATH] [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace

from core.merkle.merkle_tree import build_merkle_root
from merkle_cli.leaves import load_leaves, resolve_digest


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0


def root_cmd(args: Namespace) -> int:
    """Execute the root command. An empty leaf set raises InvalidArgumentException."""
    leaves = load_leaves(args)
    digest = resolve_digest(args)

    root = build_merkle_root(leaves, digest)
    logger.info(f"Computed root over {len(leaves)} leaves")

    if args.json:
        print(json.dumps({"leaf_count": len(leaves), "root": root}, indent=2))
    else:
        print(root)

    return EXIT_SUCCESS
