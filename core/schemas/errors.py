"""
Module 01 - Schemas
File: errors.py

Purpose: Standard error taxonomy for Merkle tree operations.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input Errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"

    # Lookup Errors
    LEAF_NOT_FOUND = "LEAF_NOT_FOUND"

    # Merkle & Commitment Errors
    MERKLE_PROOF_INVALID = "MERKLE_PROOF_INVALID"
    ROOT_MISMATCH = "ROOT_MISMATCH"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Base error model for structured error communication.

    Used by the API and CLI layers to serialize failures without
    carrying exception objects around.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_ARGUMENT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "MerkleException":
        """Convert this error model to a raised exception."""
        if self.code == ErrorCodes.LEAF_NOT_FOUND:
            return LeafNotFoundException(self.message, details=self.details)
        if self.code in (
            ErrorCodes.INVALID_ARGUMENT,
            ErrorCodes.UNSUPPORTED_ALGORITHM,
            ErrorCodes.MERKLE_PROOF_INVALID,
        ):
            return InvalidArgumentException(
                self.message, code=self.code, details=self.details
            )
        return MerkleException(
            message=self.message,
            code=self.code,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle tree errors.

    This exception carries structured error information and can be
    converted to/from MerkleError models. Every operation is a pure
    computation, so nothing raised here is retryable.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidArgumentException(MerkleException, ValueError):
    """Exception raised for missing, empty, or malformed input."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.INVALID_ARGUMENT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            details=details,
            retryable=False,
        )


class LeafNotFoundException(MerkleException, LookupError):
    """Exception raised when a target hash is absent from the leaf level."""

    def __init__(
        self,
        message: str = "Hash not found in leaf nodes",
        leaf_hash: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        if leaf_hash:
            full_details["leaf_hash"] = leaf_hash
        super().__init__(
            message=message,
            code=ErrorCodes.LEAF_NOT_FOUND,
            details=full_details,
            retryable=False,
        )


__all__ = [
    "ErrorCodes",
    "MerkleError",
    "MerkleException",
    "InvalidArgumentException",
    "LeafNotFoundException",
]
