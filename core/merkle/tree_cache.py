"""
Module 02 - Merkle Tree Cache
LRU cache of built trees keyed by leaf sequence.

Proof and root requests against the same leaf set otherwise rebuild the
whole tree every time. The cache stores levels as tuples and returns
fresh lists, so callers can never mutate a cached tree.
"""
from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Sequence

from core.crypto.hashing import Digest, sha256_hex
from core.merkle.merkle_proofs import proof_path_from_tree, find_leaf_index
from core.merkle.merkle_tree import build_merkle_tree, check_leaves
from core.schemas.errors import InvalidArgumentException
from core.schemas.merkle import ProofNode


logger = logging.getLogger(__name__)

_FrozenTree = tuple[tuple[str, ...], ...]


class MerkleTreeCache:
    """
    Bounded LRU cache of Merkle trees.

    Args:
        max_entries: Maximum number of trees kept; 0 disables caching
        digest: Digest function used to build trees
    """

    def __init__(self, max_entries: int = 128, digest: Digest = sha256_hex) -> None:
        if max_entries < 0:
            raise InvalidArgumentException(
                f"max_entries must be non-negative, got {max_entries}"
            )
        self.max_entries = max_entries
        self.digest = digest
        self.hits = 0
        self.misses = 0
        self._trees: OrderedDict[tuple[str, ...], _FrozenTree] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._trees)

    def _lookup(self, leaves: Sequence[str]) -> _FrozenTree:
        check_leaves(leaves)
        key = tuple(leaves)
        with self._lock:
            cached = self._trees.get(key)
            if cached is not None:
                self._trees.move_to_end(key)
                self.hits += 1
                logger.debug(f"Tree cache hit ({len(key)} leaves)")
                return cached
            self.misses += 1

        frozen = tuple(tuple(level) for level in build_merkle_tree(key, self.digest))

        if self.max_entries == 0:
            return frozen

        with self._lock:
            self._trees[key] = frozen
            self._trees.move_to_end(key)
            while len(self._trees) > self.max_entries:
                evicted, _ = self._trees.popitem(last=False)
                logger.debug(f"Tree cache evicted tree with {len(evicted)} leaves")
        return frozen

    def get_tree(self, leaves: Sequence[str]) -> list[list[str]]:
        """Same result as build_merkle_tree, served from cache when possible."""
        return [list(level) for level in self._lookup(leaves)]

    def get_root(self, leaves: Sequence[str]) -> str:
        """
        Same result as build_merkle_root.

        Raises:
            InvalidArgumentException: If leaves is empty or holds non-strings
        """
        if not leaves:
            raise InvalidArgumentException("Missing arguments: hashes")
        return self._lookup(leaves)[-1][0]

    def get_proof(self, leaf_hash: str, leaves: Sequence[str]) -> list[ProofNode]:
        """
        Same result as build_merkle_proof.

        Raises:
            InvalidArgumentException: If leaf_hash or leaves is empty, or
                leaves holds non-strings
            LeafNotFoundException: If leaf_hash is not in leaves
        """
        if not leaf_hash or not leaves:
            raise InvalidArgumentException("Invalid hash")
        tree = self._lookup(leaves)
        return proof_path_from_tree(tree, find_leaf_index(leaf_hash, tree))

    def clear(self) -> None:
        with self._lock:
            self._trees.clear()
            self.hits = 0
            self.misses = 0


__all__ = ["MerkleTreeCache"]
