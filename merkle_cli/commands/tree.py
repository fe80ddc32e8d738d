"""
CLI Tree Command

Build every level of a Merkle tree and print it.

Usage:
    merkle tree <leaf> <leaf> ... [--file PATH] [--json]
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace
from typing import Any

from core.merkle.merkle_tree import build_merkle_tree
from core.schemas.merkle import MerkleTree
from merkle_cli.leaves import load_leaves, resolve_digest


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0


def tree_to_dict(tree: MerkleTree) -> dict[str, Any]:
    return {
        "leaf_count": tree.leaf_count,
        "depth": tree.depth,
        "root": tree.root,
        "levels": tree.levels,
    }


def print_tree_human(tree: MerkleTree) -> None:
    """Print tree in human-readable format."""
    print(f"leaf_count: {tree.leaf_count}")
    print(f"depth: {tree.depth}")
    print(f"root: {tree.root or '(empty tree)'}")
    for i, level in enumerate(tree.levels):
        print(f"\nlevel {i} ({len(level)}):")
        for node in level:
            print(f"  {node}")


def tree_cmd(args: Namespace) -> int:
    """
    Execute the tree command.

    An empty leaf set is not an error; it prints an empty tree.
    """
    leaves = load_leaves(args)
    digest = resolve_digest(args)

    logger.info(f"Building tree over {len(leaves)} leaves")
    tree = MerkleTree(levels=build_merkle_tree(leaves, digest))

    if args.json:
        print(json.dumps(tree_to_dict(tree), indent=2))
    else:
        print_tree_human(tree)

    return EXIT_SUCCESS
