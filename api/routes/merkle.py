"""
Merkle Routes

JSON endpoints over the Merkle core:
- POST /tree   - all levels
- POST /root   - root only
- POST /proof  - inclusion proof by value or index
- POST /verify - recombine a proof against a trusted root

Core exceptions propagate to the handlers registered in api.app.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from api.deps import get_tree_cache
from api.models.requests import LeavesRequest, ProofRequest, VerifyRequest
from api.models.responses import (
    ProofResponse,
    RootResponse,
    TreeResponse,
    VerifyResponse,
)
from core.merkle.merkle_proofs import (
    build_merkle_proof_at_index,
    compute_root_from_proof,
)
from core.schemas.errors import ErrorCodes, InvalidArgumentException
from core.schemas.merkle import MerkleProof, MerkleTree


logger = logging.getLogger(__name__)

router = APIRouter(tags=["merkle"])


@router.post("/tree", response_model=TreeResponse)
def build_tree(request: LeavesRequest) -> TreeResponse:
    """
    Build every level of the tree.

    An empty leaf list returns an empty tree, not an error.
    """
    cache = get_tree_cache(request.algorithm)
    tree = MerkleTree(levels=cache.get_tree(request.leaves))
    return TreeResponse(
        leaf_count=tree.leaf_count,
        depth=tree.depth,
        root=tree.root,
        levels=tree.levels,
    )


@router.post("/root", response_model=RootResponse)
def compute_root(request: LeavesRequest) -> RootResponse:
    """Compute the Merkle root. An empty leaf list is rejected with 400."""
    cache = get_tree_cache(request.algorithm)
    root = cache.get_root(request.leaves)
    return RootResponse(leaf_count=len(request.leaves), root=root)


@router.post("/proof", response_model=ProofResponse)
def build_proof(request: ProofRequest) -> ProofResponse:
    """
    Build an inclusion proof.

    Selects the leaf by `target` (leftmost match, 404 if absent) or by
    `index` (400 if out of range).
    """
    cache = get_tree_cache(request.algorithm)

    if request.index is not None:
        nodes = build_merkle_proof_at_index(
            request.leaves, request.index, cache.digest
        )
        leaf_index = request.index
    else:
        if not request.target:
            raise InvalidArgumentException("Invalid hash")
        nodes = cache.get_proof(request.target, request.leaves)
        leaf_index = request.leaves.index(request.target)

    root = cache.get_root(request.leaves)
    logger.debug(f"Built proof for leaf {leaf_index} of {len(request.leaves)}")

    return ProofResponse(
        proof=MerkleProof(
            leaf=nodes[0].hash,
            leaf_index=leaf_index,
            nodes=nodes,
            root=root,
        )
    )


@router.post("/verify", response_model=VerifyResponse)
def verify_proof(request: VerifyRequest) -> VerifyResponse:
    """Recombine proof nodes and compare against the supplied root."""
    if not request.root:
        raise InvalidArgumentException("Root hash is required")

    digest = get_tree_cache(request.algorithm).digest
    computed_root = compute_root_from_proof(request.nodes, digest)
    ok = computed_root == request.root
    if not ok:
        logger.info("Proof did not recombine to the supplied root")

    return VerifyResponse(
        ok=ok,
        leaf=request.nodes[0].hash,
        expected_root=request.root,
        computed_root=computed_root,
        error_code=None if ok else ErrorCodes.ROOT_MISMATCH,
    )
