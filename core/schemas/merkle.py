"""
Module 01 - Schemas
File: merkle.py

Purpose: Value types for Merkle trees and inclusion proofs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Side(str, Enum):
    """Position of a node relative to its sibling at one tree level."""

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_index(cls, index: int) -> "Side":
        """Even indices sit on the left, odd indices on the right."""
        return cls.LEFT if index % 2 == 0 else cls.RIGHT

    @property
    def opposite(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class ProofNode(BaseModel):
    """
    One entry of an inclusion proof.

    The first entry of a proof holds the proven leaf and its own side.
    Every later entry holds a sibling hash and the sibling's side, which
    decides concatenation order when recombining toward the root.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hash: str = Field(..., min_length=1, description="Hex digest of the node")
    side: Side = Field(..., description="Side the node occupies")


class MerkleProof(BaseModel):
    """
    Inclusion proof envelope for a single leaf.

    Attributes:
        leaf: The leaf hash being proven
        leaf_index: 0-based position of the leaf in the leaf sequence
        nodes: Authentication path, leaf entry first, root excluded
        root: Root of the tree the proof was built from
    """

    model_config = ConfigDict(extra="forbid")

    leaf: str = Field(..., min_length=1)
    leaf_index: int = Field(..., ge=0)
    nodes: list[ProofNode] = Field(..., min_length=1)
    root: str = Field(..., min_length=1)

    @property
    def siblings(self) -> list[ProofNode]:
        """Sibling entries, bottom-up, without the leaf entry."""
        return self.nodes[1:]


class MerkleTree(BaseModel):
    """
    All levels of a Merkle tree.

    levels[0] holds the leaves exactly as supplied, levels[-1] holds the
    root as a single-element list. An empty tree has no levels.
    """

    model_config = ConfigDict(extra="forbid")

    levels: list[list[str]] = Field(default_factory=list)

    @property
    def root(self) -> str | None:
        if not self.levels:
            return None
        return self.levels[-1][0]

    @property
    def depth(self) -> int:
        return len(self.levels)

    @property
    def leaf_count(self) -> int:
        return len(self.levels[0]) if self.levels else 0

    @property
    def leaves(self) -> list[str]:
        return list(self.levels[0]) if self.levels else []


__all__ = [
    "Side",
    "ProofNode",
    "MerkleProof",
    "MerkleTree",
]
