"""
CLI Proof Command

Generate an inclusion proof for one leaf.

Usage:
    merkle proof <target> <leaf> ... [--file PATH] [--json]
    merkle proof --index N <leaf> ... [--file PATH] [--json]

The JSON output is a MerkleProof envelope accepted by `merkle verify`.
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace

from core.merkle.merkle_proofs import MerkleProver
from core.schemas.errors import InvalidArgumentException
from core.schemas.merkle import MerkleProof
from merkle_cli.leaves import load_leaves, resolve_digest


logger = logging.getLogger(__name__)


EXIT_SUCCESS = 0


def print_proof_human(proof: MerkleProof) -> None:
    """Print proof in human-readable format."""
    print(f"leaf: {proof.leaf}")
    print(f"leaf_index: {proof.leaf_index}")
    print(f"root: {proof.root}")
    print(f"\npath ({len(proof.nodes)}):")
    for i, node in enumerate(proof.nodes):
        marker = "leaf" if i == 0 else f"L{i - 1}"
        print(f"  [{marker}] {node.side.value:<5} {node.hash}")


def proof_cmd(args: Namespace) -> int:
    """
    Execute the proof command.

    With --index the first positional argument is treated as a leaf,
    not as the target.
    """
    leaves = load_leaves(args)
    prover = MerkleProver(resolve_digest(args))

    if args.index is not None:
        if args.target:
            leaves.insert(0, args.target)
        proof = prover.prove_index(leaves, args.index)
    else:
        if not args.target:
            raise InvalidArgumentException("Invalid hash")
        proof = prover.prove(args.target, leaves)

    logger.info(f"Built proof for leaf {proof.leaf_index} of {len(leaves)}")

    if args.json:
        print(json.dumps(proof.model_dump(mode="json"), indent=2))
    else:
        print_proof_human(proof)

    return EXIT_SUCCESS
