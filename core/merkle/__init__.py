"""
Module 02 - Merkle Tree and Inclusion Proofs
Deterministic Merkle tree construction + proof generation/verification.

This module provides:
- build_merkle_tree: All levels from leaf hashes
- build_merkle_root: Root only
- build_merkle_proof: Authentication path for a leaf value
- build_merkle_proof_at_index: Authentication path for a leaf position
- verify_merkle_proof: Recombine a proof and compare with a trusted root
- MerkleTreeCache: LRU cache of built trees

Canonical Commitment Rules:
1. Leaves are caller-supplied hex digests
2. Parent hashing: digest(left + right) over hex strings
3. Padding: Duplicate last node if odd number at any level
4. Empty tree: no levels; no root
5. Single leaf: root = leaf

Usage:
    from core.merkle import build_merkle_root, build_merkle_proof, verify_merkle_proof

    root = build_merkle_root(leaves)
    proof = build_merkle_proof(leaves[2], leaves)
    assert verify_merkle_proof(proof, root)
"""
from .merkle_tree import (
    balance_hashes,
    merkle_parent,
    check_leaves,
    next_level,
    build_merkle_tree,
    build_merkle_root,
    compute_tree_depth,
)

from .merkle_proofs import (
    find_leaf_index,
    get_leaf_side,
    proof_path_from_tree,
    build_merkle_proof,
    build_merkle_proof_at_index,
    compute_root_from_proof,
    verify_merkle_proof,
    MerkleProver,
    MerkleVerifier,
)

from .tree_cache import MerkleTreeCache


__all__ = [
    # Tree construction
    "balance_hashes",
    "merkle_parent",
    "check_leaves",
    "next_level",
    "build_merkle_tree",
    "build_merkle_root",
    "compute_tree_depth",
    # Lookup and proofs
    "find_leaf_index",
    "get_leaf_side",
    "proof_path_from_tree",
    "build_merkle_proof",
    "build_merkle_proof_at_index",
    "compute_root_from_proof",
    "verify_merkle_proof",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
    "MerkleTreeCache",
]
