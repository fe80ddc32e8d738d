"""
Tree Cache Unit Tests
Tests for core/merkle/tree_cache.py

- Cached results equal the uncached functions
- Hits, misses and LRU eviction
- Returned trees cannot corrupt the cache
- max_entries=0 disables storage
"""
import pytest

from core.crypto.hashing import get_digest, sha256_hex
from core.merkle.merkle_proofs import build_merkle_proof
from core.merkle.merkle_tree import build_merkle_root, build_merkle_tree
from core.merkle.tree_cache import MerkleTreeCache
from core.schemas.errors import InvalidArgumentException, LeafNotFoundException

from fixtures.sample_leaves import make_leaves


class TestCachedResults:
    """Cache answers match the direct functions."""

    def test_tree_matches(self, sample_leaves):
        cache = MerkleTreeCache()
        assert cache.get_tree(sample_leaves) == build_merkle_tree(sample_leaves)

    def test_root_matches(self, sample_leaves):
        cache = MerkleTreeCache()
        assert cache.get_root(sample_leaves) == build_merkle_root(sample_leaves)

    def test_proof_matches(self, sample_leaves):
        cache = MerkleTreeCache()
        for leaf in sample_leaves:
            assert cache.get_proof(leaf, sample_leaves) == build_merkle_proof(
                leaf, sample_leaves
            )

    def test_empty_tree(self):
        assert MerkleTreeCache().get_tree([]) == []

    def test_single_leaf_root(self):
        leaf = sha256_hex("one")
        assert MerkleTreeCache().get_root([leaf]) == leaf

    def test_digest_is_used(self, four_leaves):
        digest = get_digest("sha512")
        cache = MerkleTreeCache(digest=digest)
        assert cache.get_root(four_leaves) == build_merkle_root(four_leaves, digest)


class TestCacheErrors:
    """Cache keeps the same failure contract."""

    def test_root_empty_raises(self):
        with pytest.raises(InvalidArgumentException):
            MerkleTreeCache().get_root([])

    def test_proof_empty_target_raises(self, four_leaves):
        with pytest.raises(InvalidArgumentException):
            MerkleTreeCache().get_proof("", four_leaves)

    def test_proof_missing_target_raises(self, four_leaves):
        with pytest.raises(LeafNotFoundException):
            MerkleTreeCache().get_proof(sha256_hex("absent"), four_leaves)

    def test_bare_string_rejected(self):
        cache = MerkleTreeCache()
        with pytest.raises(InvalidArgumentException):
            cache.get_tree("abcd")
        with pytest.raises(InvalidArgumentException):
            cache.get_root("abcd")
        with pytest.raises(InvalidArgumentException):
            cache.get_proof("a", "abcd")
        assert len(cache) == 0

    def test_non_string_leaf_rejected(self):
        cache = MerkleTreeCache()
        with pytest.raises(InvalidArgumentException) as exc_info:
            cache.get_root([["x"], "y"])
        assert exc_info.value.details["index"] == 0
        with pytest.raises(InvalidArgumentException):
            cache.get_tree(["a", 3])
        assert cache.misses == 0

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentException):
            MerkleTreeCache().get_tree(None)

    def test_negative_size_rejected(self):
        with pytest.raises(InvalidArgumentException):
            MerkleTreeCache(max_entries=-1)


class TestCacheBehavior:
    """Hits, misses, eviction and isolation."""

    def test_hit_and_miss_counters(self, four_leaves):
        cache = MerkleTreeCache()
        cache.get_root(four_leaves)
        cache.get_root(four_leaves)
        cache.get_proof(four_leaves[0], four_leaves)

        assert cache.misses == 1
        assert cache.hits == 2
        assert len(cache) == 1

    def test_lru_eviction(self):
        cache = MerkleTreeCache(max_entries=2)
        first, second, third = make_leaves(3, "a"), make_leaves(3, "b"), make_leaves(3, "c")

        cache.get_tree(first)
        cache.get_tree(second)
        cache.get_tree(first)   # first becomes most recent
        cache.get_tree(third)   # evicts second

        assert len(cache) == 2
        misses = cache.misses
        cache.get_tree(first)
        assert cache.misses == misses
        cache.get_tree(second)
        assert cache.misses == misses + 1

    def test_returned_tree_mutation_does_not_leak(self, four_leaves):
        cache = MerkleTreeCache()
        tree = cache.get_tree(four_leaves)
        tree[0].append("garbage")
        tree[-1][0] = "garbage"

        assert cache.get_tree(four_leaves) == build_merkle_tree(four_leaves)

    def test_caller_leaves_not_mutated(self, three_leaves):
        snapshot = list(three_leaves)
        MerkleTreeCache().get_tree(three_leaves)
        assert three_leaves == snapshot

    def test_caller_mutation_after_caching(self, four_leaves):
        cache = MerkleTreeCache()
        root_before = cache.get_root(four_leaves)
        four_leaves[0] = sha256_hex("changed")
        assert cache.get_root(four_leaves) != root_before

    def test_disabled_cache_stores_nothing(self, four_leaves):
        cache = MerkleTreeCache(max_entries=0)
        cache.get_root(four_leaves)
        cache.get_root(four_leaves)
        assert len(cache) == 0
        assert cache.misses == 2

    def test_clear(self, four_leaves):
        cache = MerkleTreeCache()
        cache.get_root(four_leaves)
        cache.clear()
        assert len(cache) == 0
        assert cache.hits == 0
        assert cache.misses == 0
