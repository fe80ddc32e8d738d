"""
Module 02 - Merkle Tree Implementation
Deterministic Merkle tree construction and root computation.

This module provides:
- Balancing of odd-length levels
- Full tree construction (all levels kept)
- Root computation (levels discarded)
- Tree depth computation

Canonical Commitment Rules (Hard Contracts):
1. Leaves are hex digests supplied by the caller; they are never rehashed
2. Parent hashing: parent = digest(left + right), concatenating hex strings
3. Padding rule: Duplicate last node if odd number at any level
4. Padding is transient; stored levels keep their natural length
5. Empty leaves: build_merkle_tree([]) returns [], build_merkle_root([]) raises
6. Single leaf: root = leaf (the leaf hash itself, no hashing) for both
   build_merkle_tree and build_merkle_root

Determinism Notes:
- No randomness or non-deterministic ordering
- This module never sorts leaves - it trusts input order
- Caller sequences are copied, never mutated
"""
from __future__ import annotations

from typing import Sequence

from core.crypto.hashing import Digest, hash_concat, sha256_hex
from core.schemas.errors import InvalidArgumentException


def balance_hashes(hashes: Sequence[str]) -> list[str]:
    """
    Return an even-length copy of a level.

    Example: [a, b, c] -> [a, b, c, c]

    Args:
        hashes: One tree level

    Returns:
        New list; the input plus a copy of its last element when odd
    """
    balanced = list(hashes)
    if len(balanced) % 2 == 1:
        balanced.append(balanced[-1])
    return balanced


def merkle_parent(left: str, right: str, digest: Digest = sha256_hex) -> str:
    """
    Compute the parent hash of two child nodes.

    Args:
        left: Left child hex digest
        right: Right child hex digest
        digest: Digest function

    Returns:
        digest(left + right)
    """
    return hash_concat(left, right, digest)


def next_level(level: Sequence[str], digest: Digest = sha256_hex) -> list[str]:
    """
    Derive the level above by balancing and hashing adjacent pairs.

    Args:
        level: Current level (any length >= 1)
        digest: Digest function

    Returns:
        Newly allocated parent level of length ceil(len(level) / 2)
    """
    balanced = balance_hashes(level)
    return [
        merkle_parent(balanced[i], balanced[i + 1], digest)
        for i in range(0, len(balanced), 2)
    ]


def check_leaves(leaves: Sequence[str]) -> None:
    """
    Reject input that is not a sequence of strings.

    Raises:
        InvalidArgumentException: If leaves is None, a bare string, or
            holds a non-string element
    """
    if leaves is None:
        raise InvalidArgumentException("Missing arguments: hashes")
    if isinstance(leaves, (str, bytes)):
        raise InvalidArgumentException(
            "Leaves must be a sequence of hex strings, not a single string"
        )
    for i, leaf in enumerate(leaves):
        if not isinstance(leaf, str):
            raise InvalidArgumentException(
                f"Leaf at index {i} is not a string",
                details={"index": i, "type": type(leaf).__name__},
            )


def build_merkle_tree(
    leaves: Sequence[str],
    digest: Digest = sha256_hex,
) -> list[list[str]]:
    """
    Build every level of a Merkle tree from leaf hashes.

    Algorithm:
    1. If empty: return [] (no tree)
    2. If single leaf: return [[leaf]] - no hashing occurs
    3. Otherwise, iteratively build levels:
       - Balance the current level (duplicate last if odd)
       - Pair adjacent nodes and compute parent hashes
       - Append the new level; stop once it holds one hash

    Args:
        leaves: Sequence of leaf hashes. Order matters and is preserved.
        digest: Digest function used for parents

    Returns:
        List of levels; levels[0] is a copy of the leaves and
        levels[-1] is [root]

    Raises:
        InvalidArgumentException: If leaves is None or holds non-strings

    Example:
        >>> tree = build_merkle_tree([a, b, c])
        >>> tree[1] == [merkle_parent(a, b), merkle_parent(c, c)]
        True
    """
    check_leaves(leaves)

    if len(leaves) == 0:
        return []

    tree: list[list[str]] = [list(leaves)]

    while len(tree[-1]) > 1:
        tree.append(next_level(tree[-1], digest))

    return tree


def build_merkle_root(
    leaves: Sequence[str],
    digest: Digest = sha256_hex,
) -> str:
    """
    Compute the Merkle root of leaf hashes without keeping levels.

    Runs the same balance-and-combine loop as build_merkle_tree but only
    holds one level at a time.

    A single leaf is its own root, matching build_merkle_tree. The leaf
    is never paired with itself.

    Args:
        leaves: Sequence of leaf hashes
        digest: Digest function used for parents

    Returns:
        Root hex digest

    Raises:
        InvalidArgumentException: If leaves is empty or holds non-strings
    """
    check_leaves(leaves)

    if len(leaves) == 0:
        raise InvalidArgumentException("Missing arguments: hashes")

    current_level: list[str] = list(leaves)

    while len(current_level) > 1:
        current_level = next_level(current_level, digest)

    return current_level[0]


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the number of levels build_merkle_tree emits.

    A single leaf has depth 1, two leaves have depth 2, etc.

    Args:
        num_leaves: Number of leaves in the tree

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_leaves < 0:
        raise InvalidArgumentException(
            f"Leaf count must be non-negative, got {num_leaves}"
        )
    if num_leaves == 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        n = (n + 1) // 2
        depth += 1

    return depth


__all__ = [
    "balance_hashes",
    "merkle_parent",
    "next_level",
    "build_merkle_tree",
    "build_merkle_root",
    "compute_tree_depth",
]
