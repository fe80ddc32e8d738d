"""
API Request Models

Pydantic models for API request validation.
"""

from pydantic import BaseModel, Field, model_validator

from core.schemas.merkle import ProofNode


class LeavesRequest(BaseModel):
    """Request body for POST /tree and POST /root."""

    leaves: list[str] = Field(
        default_factory=list,
        description="Ordered leaf hashes (lowercase hex)",
    )
    algorithm: str | None = Field(
        default=None,
        description="Digest algorithm used to hash parents (default: configured)",
    )


class ProofRequest(LeavesRequest):
    """
    Request body for POST /proof.

    Exactly one of `target` or `index` selects the leaf to prove.
    """

    target: str | None = Field(
        default=None,
        description="Leaf hash to prove (leftmost occurrence wins)",
    )
    index: int | None = Field(
        default=None,
        ge=0,
        description="Position of the leaf to prove",
    )

    @model_validator(mode="after")
    def _one_selector(self) -> "ProofRequest":
        if self.target is not None and self.index is not None:
            raise ValueError("Provide either target or index, not both")
        return self


class VerifyRequest(BaseModel):
    """Request body for POST /verify."""

    nodes: list[ProofNode] = Field(
        ...,
        description="Proof nodes, leaf entry first",
    )
    root: str = Field(
        ...,
        description="Trusted root to compare against",
    )
    algorithm: str | None = Field(
        default=None,
        description="Digest algorithm the tree was built with (default: configured)",
    )
