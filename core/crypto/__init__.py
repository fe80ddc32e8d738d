"""
Core cryptographic utilities.

Module 02 provides text digests for Merkle trees.
"""
from .hashing import (
    Digest,
    DEFAULT_ALGORITHM,
    SUPPORTED_ALGORITHMS,
    sha256_hex,
    get_digest,
    hash_concat,
    is_hex_digest,
)

__all__ = [
    "Digest",
    "DEFAULT_ALGORITHM",
    "SUPPORTED_ALGORITHMS",
    "sha256_hex",
    "get_digest",
    "hash_concat",
    "is_hex_digest",
]
