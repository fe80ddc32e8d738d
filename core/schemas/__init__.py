"""
Module 01 - Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Error models and exceptions
from .errors import (
    ErrorCodes,
    MerkleError,
    MerkleException,
    InvalidArgumentException,
    LeafNotFoundException,
)

# Merkle value types
from .merkle import (
    Side,
    ProofNode,
    MerkleProof,
    MerkleTree,
)

__all__ = [
    # Errors
    "ErrorCodes",
    "MerkleError",
    "MerkleException",
    "InvalidArgumentException",
    "LeafNotFoundException",
    # Merkle types
    "Side",
    "ProofNode",
    "MerkleProof",
    "MerkleTree",
]
