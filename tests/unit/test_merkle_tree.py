"""
Merkle Tree Unit Tests
Tests for core/merkle/merkle_tree.py

1. Balancing - odd levels duplicate the last hash, input untouched
2. Tree shape - level counts and stored levels stay unpadded
3. Concrete 3- and 4-leaf trees match hand-computed hashes
4. Root agreement - last tree level equals build_merkle_root
5. Empty input - build_merkle_tree([]) == [], build_merkle_root([]) raises
6. Single leaf - both entry points return the leaf verbatim
"""
import math

import pytest

from core.crypto.hashing import get_digest, hash_concat, sha256_hex
from core.merkle.merkle_tree import (
    balance_hashes,
    build_merkle_root,
    build_merkle_tree,
    compute_tree_depth,
    merkle_parent,
    next_level,
)
from core.schemas.errors import InvalidArgumentException

from fixtures.sample_leaves import SAMPLE_LEAVES, make_leaves


class TestBalanceHashes:
    """Tests for balance_hashes()."""

    def test_even_length_unchanged(self):
        hashes = ["a", "b", "c", "d"]
        assert balance_hashes(hashes) == ["a", "b", "c", "d"]

    def test_odd_length_duplicates_last(self):
        assert balance_hashes(["a", "b", "c"]) == ["a", "b", "c", "c"]

    def test_single_element(self):
        assert balance_hashes(["a"]) == ["a", "a"]

    def test_empty(self):
        assert balance_hashes([]) == []

    def test_does_not_mutate_input(self):
        hashes = ["a", "b", "c"]
        balanced = balance_hashes(hashes)
        assert hashes == ["a", "b", "c"]
        assert balanced is not hashes

    def test_even_returns_copy(self):
        hashes = ["a", "b"]
        assert balance_hashes(hashes) is not hashes

    def test_accepts_tuple(self):
        assert balance_hashes(("a", "b", "c")) == ["a", "b", "c", "c"]


class TestNextLevel:
    """Tests for next_level()."""

    def test_pairs_adjacent(self):
        a, b, c, d = make_leaves(4)
        assert next_level([a, b, c, d]) == [merkle_parent(a, b), merkle_parent(c, d)]

    def test_odd_pairs_tail_with_itself(self):
        a, b, c = make_leaves(3)
        assert next_level([a, b, c]) == [merkle_parent(a, b), merkle_parent(c, c)]


class TestMerkleParent:
    """Tests for merkle_parent()."""

    def test_uses_parent_hashing_rule(self):
        a, b = make_leaves(2)
        assert merkle_parent(a, b) == hash_concat(a, b)
        digest = get_digest("blake2s")
        assert merkle_parent(a, b, digest) == hash_concat(a, b, digest)


class TestEmptyTree:
    """Tests for empty input."""

    def test_build_tree_empty_returns_empty(self):
        assert build_merkle_tree([]) == []

    def test_build_root_empty_raises(self):
        with pytest.raises(InvalidArgumentException, match="Missing arguments"):
            build_merkle_root([])

    def test_build_root_empty_is_value_error(self):
        with pytest.raises(ValueError):
            build_merkle_root([])

    def test_none_rejected(self):
        with pytest.raises(InvalidArgumentException):
            build_merkle_tree(None)
        with pytest.raises(InvalidArgumentException):
            build_merkle_root(None)


class TestSingleLeaf:
    """Single-leaf roots are the leaf itself for both entry points."""

    def test_tree_is_single_level(self):
        leaf = sha256_hex("only one")
        assert build_merkle_tree([leaf]) == [[leaf]]

    def test_root_equals_leaf(self):
        leaf = sha256_hex("single leaf")
        assert build_merkle_root([leaf]) == leaf

    def test_root_is_not_self_paired(self):
        leaf = sha256_hex("single leaf")
        assert build_merkle_root([leaf]) != merkle_parent(leaf, leaf)

    def test_entry_points_agree(self):
        leaf = sha256_hex("agree")
        assert build_merkle_tree([leaf])[-1][0] == build_merkle_root([leaf])

    def test_no_hashing_for_non_hex_leaf(self):
        assert build_merkle_tree(["not-a-hash"]) == [["not-a-hash"]]
        assert build_merkle_root(["not-a-hash"]) == "not-a-hash"


class TestConcreteTrees:
    """Hand-computed small trees."""

    def test_four_leaves(self, four_leaves):
        h0, h1, h2, h3 = four_leaves
        tree = build_merkle_tree(four_leaves)

        level1 = [sha256_hex(h0 + h1), sha256_hex(h2 + h3)]
        root = sha256_hex(level1[0] + level1[1])

        assert len(tree) == 3
        assert tree[0] == four_leaves
        assert tree[1] == level1
        assert tree[2] == [root]
        assert build_merkle_root(four_leaves) == root

    def test_three_leaves(self, three_leaves):
        h0, h1, h2 = three_leaves
        tree = build_merkle_tree(three_leaves)

        level1 = [sha256_hex(h0 + h1), sha256_hex(h2 + h2)]
        root = sha256_hex(level1[0] + level1[1])

        # Level 0 is stored unpadded
        assert tree[0] == [h0, h1, h2]
        assert tree[1] == level1
        assert tree[2] == [root]
        assert build_merkle_root(three_leaves) == root

    def test_five_leaves_pads_at_multiple_levels(self):
        a, b, c, d, e = make_leaves(5)

        # Level 0: [a, b, c, d, e, e]
        # Level 1: [ab, cd, ee]  -> padded to [ab, cd, ee, ee]
        # Level 2: [abcd, eeee]
        # Level 3: [root]
        ab = merkle_parent(a, b)
        cd = merkle_parent(c, d)
        ee = merkle_parent(e, e)
        abcd = merkle_parent(ab, cd)
        eeee = merkle_parent(ee, ee)
        root = merkle_parent(abcd, eeee)

        tree = build_merkle_tree([a, b, c, d, e])
        assert tree == [[a, b, c, d, e], [ab, cd, ee], [abcd, eeee], [root]]
        assert build_merkle_root([a, b, c, d, e]) == root

    def test_two_leaves(self):
        a, b = make_leaves(2)
        assert build_merkle_tree([a, b]) == [[a, b], [merkle_parent(a, b)]]


class TestTreeShape:
    """Level counts and root agreement across sizes."""

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 7, 8, 9, 16, 17, 21, 33])
    def test_depth_is_one_plus_ceil_log2(self, count):
        tree = build_merkle_tree(make_leaves(count))
        assert len(tree) == 1 + math.ceil(math.log2(count))
        assert len(tree) == compute_tree_depth(count)

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 6, 7, 8, 11, 21])
    def test_last_level_equals_root(self, count):
        leaves = make_leaves(count)
        tree = build_merkle_tree(leaves)
        assert len(tree[-1]) == 1
        assert tree[-1][0] == build_merkle_root(leaves)

    def test_level_widths_halve_with_ceiling(self):
        tree = build_merkle_tree(make_leaves(21))
        assert [len(level) for level in tree] == [21, 11, 6, 3, 2, 1]

    def test_sample_leaves(self):
        tree = build_merkle_tree(SAMPLE_LEAVES)
        assert len(tree) == 6
        assert tree[0] == list(SAMPLE_LEAVES)
        assert tree[-1][0] == build_merkle_root(SAMPLE_LEAVES)

    def test_levels_are_independent_lists(self, four_leaves):
        tree = build_merkle_tree(four_leaves)
        tree[0].append("extra")
        assert four_leaves == make_leaves(4)


class TestDeterminism:
    """Tests for deterministic and non-mutating construction."""

    def test_same_leaves_same_tree(self, sample_leaves):
        assert build_merkle_tree(sample_leaves) == build_merkle_tree(sample_leaves)

    def test_input_not_mutated(self, sample_leaves):
        snapshot = list(sample_leaves)
        build_merkle_tree(sample_leaves)
        build_merkle_root(sample_leaves)
        assert sample_leaves == snapshot

    def test_leaf_order_matters(self):
        leaves = make_leaves(3)
        assert build_merkle_root(leaves) != build_merkle_root(list(reversed(leaves)))

    def test_different_digest_different_root(self, four_leaves):
        assert build_merkle_root(four_leaves) != build_merkle_root(
            four_leaves, get_digest("sha512")
        )

    def test_custom_digest_used_for_parents(self, four_leaves):
        digest = get_digest("sha3_256")
        tree = build_merkle_tree(four_leaves, digest)
        assert tree[1][0] == digest(four_leaves[0] + four_leaves[1])

    def test_duplicate_leaves_allowed(self):
        leaf = sha256_hex("dup")
        root = build_merkle_root([leaf, leaf])
        assert root == merkle_parent(leaf, leaf)


class TestInputValidation:
    """Tests for malformed input."""

    def test_non_string_leaf_rejected(self):
        with pytest.raises(InvalidArgumentException) as exc_info:
            build_merkle_tree(["a", 3])
        assert exc_info.value.details["index"] == 1

    def test_bare_string_rejected(self):
        with pytest.raises(InvalidArgumentException):
            build_merkle_root("deadbeef")


class TestComputeTreeDepth:
    """Tests for compute_tree_depth()."""

    @pytest.mark.parametrize(
        "count,depth",
        [(0, 0), (1, 1), (2, 2), (3, 3), (4, 3), (5, 4), (8, 4), (9, 5), (21, 6)],
    )
    def test_known_depths(self, count, depth):
        assert compute_tree_depth(count) == depth

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentException):
            compute_tree_depth(-1)
