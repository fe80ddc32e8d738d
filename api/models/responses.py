"""
API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from core.schemas.merkle import MerkleProof


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "merkle-paths-api"
    version: str
    default_algorithm: str = Field(..., description="Digest used when a request names none")
    algorithms: list[str] = Field(default_factory=list, description="Accepted digest names")
    cache_enabled: bool = False


class TreeResponse(BaseModel):
    """Response for POST /tree endpoint."""

    ok: bool = True
    leaf_count: int = Field(..., description="Number of leaves")
    depth: int = Field(..., description="Number of levels, 0 for an empty tree")
    root: str | None = Field(default=None, description="Root hash, absent for an empty tree")
    levels: list[list[str]] = Field(default_factory=list)


class RootResponse(BaseModel):
    """Response for POST /root endpoint."""

    ok: bool = True
    leaf_count: int = Field(..., description="Number of leaves")
    root: str = Field(..., description="Merkle root")


class ProofResponse(BaseModel):
    """Response for POST /proof endpoint."""

    ok: bool = True
    proof: MerkleProof = Field(..., description="Inclusion proof envelope")


class VerifyResponse(BaseModel):
    """Response for POST /verify endpoint."""

    ok: bool = Field(..., description="Whether the proof recombines to the root")
    leaf: str = Field(..., description="Leaf hash from the first proof node")
    expected_root: str
    computed_root: str
    error_code: str | None = Field(
        default=None,
        description="ROOT_MISMATCH when the proof does not recombine to the root",
    )


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail
