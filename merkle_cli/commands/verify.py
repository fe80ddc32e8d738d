"""
CLI Verify Command

Recombine an inclusion proof and compare it against a trusted root.

Usage:
    merkle verify --proof proof.json [--root HEX] [--json]

The proof file holds either a MerkleProof envelope (as written by
`merkle proof --json`) or a bare list of {"hash", "side"} nodes. When
--root is given it is the trusted root; otherwise the envelope's root
is used.
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from core.merkle.merkle_proofs import compute_root_from_proof
from core.schemas.errors import ErrorCodes, InvalidArgumentException
from core.schemas.merkle import MerkleProof, ProofNode
from merkle_cli.leaves import resolve_digest


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2

_NODE_LIST = TypeAdapter(list[ProofNode])


@dataclass
class VerifySummary:
    """Summary of proof verification for CLI output."""
    proof_path: str = ""
    leaf: str = ""
    expected_root: str = ""
    computed_root: str = ""
    ok: bool = False
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_proof_file(path: Path) -> tuple[list[ProofNode], str | None]:
    """
    Load proof nodes and the optional embedded root from a JSON file.

    Raises:
        InvalidArgumentException: If the file is missing or malformed
    """
    if not path.is_file():
        raise InvalidArgumentException(f"Proof file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArgumentException(f"Proof file is not valid JSON: {e}") from e

    try:
        if isinstance(data, list):
            return _NODE_LIST.validate_python(data), None
        envelope = MerkleProof.model_validate(data)
    except ValidationError as e:
        raise InvalidArgumentException(
            f"Malformed proof: {e.error_count()} validation error(s)",
            code=ErrorCodes.MERKLE_PROOF_INVALID,
            details={"errors": e.errors(include_url=False)},
        ) from e
    return envelope.nodes, envelope.root


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    print(f"proof: {summary.proof_path}")
    print(f"leaf: {summary.leaf}")
    print(f"expected_root: {summary.expected_root}")
    print(f"computed_root: {summary.computed_root}")
    print(f"ok: {str(summary.ok).lower()}")
    if summary.error_code:
        print(f"error: {summary.error_code}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Returns:
        0 if the proof recombines to the root, 2 if it does not
    """
    proof_path = Path(args.proof)
    nodes, embedded_root = load_proof_file(proof_path)

    expected_root = args.root or embedded_root
    if not expected_root:
        print("Error: No root given and proof file carries none", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    computed_root = compute_root_from_proof(nodes, resolve_digest(args))
    summary = VerifySummary(
        proof_path=str(proof_path),
        leaf=nodes[0].hash,
        expected_root=expected_root,
        computed_root=computed_root,
        ok=computed_root == expected_root,
    )
    if not summary.ok:
        summary.error_code = ErrorCodes.ROOT_MISMATCH

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    if summary.ok:
        logger.info("Verification passed")
        return EXIT_SUCCESS

    logger.warning("Verification failed")
    return EXIT_VERIFICATION_FAILED
