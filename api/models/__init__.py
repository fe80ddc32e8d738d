"""API request and response models."""

from api.models.requests import LeavesRequest, ProofRequest, VerifyRequest
from api.models.responses import (
    HealthResponse,
    TreeResponse,
    RootResponse,
    ProofResponse,
    VerifyResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "LeavesRequest",
    "ProofRequest",
    "VerifyRequest",
    "HealthResponse",
    "TreeResponse",
    "RootResponse",
    "ProofResponse",
    "VerifyResponse",
    "ErrorDetail",
    "ErrorResponse",
]
