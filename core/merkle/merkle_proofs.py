"""
Module 02 - Merkle Proofs
Leaf lookup, inclusion proof generation and proof verification.

Proof Layout:
- nodes[0]: the proven leaf and the side it occupies at level 0
- nodes[1:]: one sibling per level below the root, bottom-up, each
  tagged with the side the *sibling* occupies
- The root is never part of the node list

Recombination Rule:
- sibling on the RIGHT: current = digest(current + sibling)
- sibling on the LEFT:  current = digest(sibling + current)

Lookup Rule:
- Value lookups match the first (leftmost) occurrence of a leaf.
  Use build_merkle_proof_at_index to prove a specific duplicate.
"""
from __future__ import annotations

from typing import Sequence

from core.crypto.hashing import Digest, sha256_hex
from core.merkle.merkle_tree import build_merkle_tree, merkle_parent
from core.schemas.errors import (
    ErrorCodes,
    InvalidArgumentException,
    LeafNotFoundException,
)
from core.schemas.merkle import MerkleProof, MerkleTree, ProofNode, Side


def find_leaf_index(leaf_hash: str, tree: Sequence[Sequence[str]]) -> int:
    """
    Find the first position of a hash in the leaf level.

    Args:
        leaf_hash: Hash to look for
        tree: Tree levels, tree[0] being the leaves

    Returns:
        0-based index of the leftmost match

    Raises:
        LeafNotFoundException: If the hash is not a leaf
    """
    if tree:
        for index, candidate in enumerate(tree[0]):
            if candidate == leaf_hash:
                return index
    raise LeafNotFoundException(leaf_hash=leaf_hash)


def get_leaf_side(leaf_hash: str, tree: Sequence[Sequence[str]]) -> Side:
    """
    Report which side a leaf occupies.

    Returns:
        Side.LEFT for an even index, Side.RIGHT for an odd one

    Raises:
        LeafNotFoundException: If the hash is not a leaf
    """
    return Side.from_index(find_leaf_index(leaf_hash, tree))


def proof_path_from_tree(tree: Sequence[Sequence[str]], index: int) -> list[ProofNode]:
    """Collect the leaf entry and one sibling per level below the root."""
    leaf = tree[0][index]
    nodes = [ProofNode(hash=leaf, side=Side.from_index(index))]

    current_index = index
    for level in tree[:-1]:
        if current_index % 2 == 0:
            sibling_index = current_index + 1
            # Stored levels are unpadded; the balanced tail pairs with itself
            if sibling_index >= len(level):
                sibling_index = current_index
            nodes.append(ProofNode(hash=level[sibling_index], side=Side.RIGHT))
        else:
            nodes.append(ProofNode(hash=level[current_index - 1], side=Side.LEFT))
        current_index //= 2

    return nodes


def build_merkle_proof(
    leaf_hash: str,
    leaves: Sequence[str],
    digest: Digest = sha256_hex,
) -> list[ProofNode]:
    """
    Generate the authentication path for a leaf, looked up by value.

    The tree is rebuilt from scratch on every call.

    Args:
        leaf_hash: Leaf to prove
        leaves: Full ordered leaf sequence
        digest: Digest function used for parents

    Returns:
        Proof nodes, leaf entry first, root excluded. A single-leaf tree
        yields just the leaf entry.

    Raises:
        InvalidArgumentException: If leaf_hash or leaves is empty
        LeafNotFoundException: If leaf_hash is not in leaves
    """
    if not leaf_hash or not leaves:
        raise InvalidArgumentException("Invalid hash")

    tree = build_merkle_tree(leaves, digest)
    index = find_leaf_index(leaf_hash, tree)
    return proof_path_from_tree(tree, index)


def build_merkle_proof_at_index(
    leaves: Sequence[str],
    index: int,
    digest: Digest = sha256_hex,
) -> list[ProofNode]:
    """
    Generate the authentication path for the leaf at a given position.

    Unlike build_merkle_proof this can address any copy of a duplicated
    leaf value.

    Raises:
        InvalidArgumentException: If leaves is empty or index is out of range
    """
    if not leaves:
        raise InvalidArgumentException("Cannot generate proof for empty leaf list")
    if index < 0 or index >= len(leaves):
        raise InvalidArgumentException(
            f"Leaf index {index} out of range for {len(leaves)} leaves",
            details={"index": index, "leaf_count": len(leaves)},
        )

    tree = build_merkle_tree(leaves, digest)
    return proof_path_from_tree(tree, index)


def compute_root_from_proof(
    proof: Sequence[ProofNode],
    digest: Digest = sha256_hex,
) -> str:
    """
    Recombine a proof bottom-up into the root it commits to.

    Raises:
        InvalidArgumentException: If the proof is empty (MERKLE_PROOF_INVALID)
    """
    if not proof:
        raise InvalidArgumentException(
            "Proof must contain at least the leaf entry",
            code=ErrorCodes.MERKLE_PROOF_INVALID,
        )

    current_hash = proof[0].hash
    for node in proof[1:]:
        if node.side == Side.RIGHT:
            current_hash = merkle_parent(current_hash, node.hash, digest)
        else:
            current_hash = merkle_parent(node.hash, current_hash, digest)

    return current_hash


def verify_merkle_proof(
    proof: Sequence[ProofNode],
    root: str,
    digest: Digest = sha256_hex,
) -> bool:
    """
    Verify a proof against a trusted root.

    Args:
        proof: Proof nodes as produced by build_merkle_proof
        root: Root obtained out-of-band
        digest: Digest function the tree was built with

    Returns:
        True if the proof recombines to root, False otherwise

    Raises:
        InvalidArgumentException: If proof or root is empty
    """
    if not root:
        raise InvalidArgumentException("Root hash is required")
    return compute_root_from_proof(proof, digest) == root


class MerkleProver:
    """
    Convenience class for generating Merkle proofs.

    Binds a digest function and wraps results in MerkleProof envelopes
    that also carry the leaf index and root.

    Example:
        >>> prover = MerkleProver()
        >>> proof = prover.prove(leaves[1], leaves)
        >>> proof.leaf == leaves[1]
        True
    """

    def __init__(self, digest: Digest = sha256_hex) -> None:
        self.digest = digest

    def build_tree(self, leaves: Sequence[str]) -> MerkleTree:
        return MerkleTree(levels=build_merkle_tree(leaves, self.digest))

    def compute_root(self, leaves: Sequence[str]) -> str:
        tree = build_merkle_tree(leaves, self.digest)
        if not tree:
            raise InvalidArgumentException("Missing arguments: hashes")
        return tree[-1][0]

    def prove(self, leaf_hash: str, leaves: Sequence[str]) -> MerkleProof:
        """
        Prove the leftmost occurrence of leaf_hash.

        Raises:
            InvalidArgumentException: If leaf_hash or leaves is empty
            LeafNotFoundException: If leaf_hash is not in leaves
        """
        if not leaf_hash or not leaves:
            raise InvalidArgumentException("Invalid hash")
        tree = build_merkle_tree(leaves, self.digest)
        index = find_leaf_index(leaf_hash, tree)
        return MerkleProof(
            leaf=leaf_hash,
            leaf_index=index,
            nodes=proof_path_from_tree(tree, index),
            root=tree[-1][0],
        )

    def prove_index(self, leaves: Sequence[str], index: int) -> MerkleProof:
        """Prove the leaf at a given position."""
        nodes = build_merkle_proof_at_index(leaves, index, self.digest)
        return MerkleProof(
            leaf=leaves[index],
            leaf_index=index,
            nodes=nodes,
            root=compute_root_from_proof(nodes, self.digest),
        )


class MerkleVerifier:
    """Convenience class for verifying Merkle proofs."""

    def __init__(self, digest: Digest = sha256_hex) -> None:
        self.digest = digest

    def verify(self, proof: MerkleProof) -> bool:
        """
        Verify a proof envelope against its own claimed root.

        Also checks that the first node matches the claimed leaf.
        """
        if proof.nodes[0].hash != proof.leaf:
            return False
        return verify_merkle_proof(proof.nodes, proof.root, self.digest)

    def verify_nodes(self, nodes: Sequence[ProofNode], root: str) -> bool:
        return verify_merkle_proof(nodes, root, self.digest)


__all__ = [
    "find_leaf_index",
    "get_leaf_side",
    "proof_path_from_tree",
    "build_merkle_proof",
    "build_merkle_proof_at_index",
    "compute_root_from_proof",
    "verify_merkle_proof",
    "MerkleProver",
    "MerkleVerifier",
]
