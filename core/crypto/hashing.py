"""
Module 02 - Hashing Utilities
Text digests for Merkle commitments.

This module provides:
- SHA-256 hex digests for text
- A registry of alternative digest algorithms
- The parent hashing rule used by every tree level
- Hex digest shape checks for untrusted input

Hashing Rules (Hard Contracts):
1. Input text is UTF-8 encoded before hashing
2. Output is always lowercase hexadecimal
3. Parents hash the concatenated hex *strings* of their children,
   never the decoded bytes
"""
from __future__ import annotations

import hashlib
import re
from typing import Callable

from core.schemas.errors import InvalidArgumentException, ErrorCodes


# A digest maps text to a fixed-width lowercase hex string
Digest = Callable[[str], str]

DEFAULT_ALGORITHM = "sha256"

SUPPORTED_ALGORITHMS: frozenset[str] = frozenset({
    "sha256",
    "sha512",
    "sha3_256",
    "blake2b",
    "blake2s",
})

_HEX_RE = re.compile(r"^[0-9a-f]+$")


def sha256_hex(text: str) -> str:
    """
    Compute the SHA-256 digest of text as lowercase hex.

    Args:
        text: Arbitrary text (UTF-8 encoded before hashing)

    Returns:
        64-character lowercase hex string

    Example:
        >>> sha256_hex("hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def _make_digest(algorithm: str) -> Digest:
    def digest(text: str) -> str:
        return hashlib.new(algorithm, text.encode("utf-8")).hexdigest()

    digest.__name__ = f"{algorithm}_hex"
    return digest


def get_digest(algorithm: str = DEFAULT_ALGORITHM) -> Digest:
    """
    Look up a text digest function by algorithm name.

    Args:
        algorithm: One of SUPPORTED_ALGORITHMS (case-insensitive)

    Returns:
        Callable mapping text to a lowercase hex digest

    Raises:
        InvalidArgumentException: If the algorithm is not supported
    """
    name = (algorithm or "").strip().lower().replace("-", "_")
    if name not in SUPPORTED_ALGORITHMS:
        raise InvalidArgumentException(
            f"Unsupported hash algorithm: {algorithm!r}",
            code=ErrorCodes.UNSUPPORTED_ALGORITHM,
            details={"supported": sorted(SUPPORTED_ALGORITHMS)},
        )
    if name == DEFAULT_ALGORITHM:
        return sha256_hex
    return _make_digest(name)


def hash_concat(left: str, right: str, digest: Digest = sha256_hex) -> str:
    """
    Hash the concatenation of two hex digests.

    This is the Merkle parent rule: parent = digest(left + right)

    Args:
        left: Left child hex digest
        right: Right child hex digest
        digest: Digest function to apply

    Returns:
        Parent hex digest
    """
    return digest(left + right)


def is_hex_digest(value: object, length: int | None = None) -> bool:
    """
    Check whether a value looks like a lowercase hex digest.

    Args:
        value: Candidate value
        length: Required length in characters (any length if None)

    Returns:
        True if value is a non-empty lowercase hex string of the right length
    """
    if not isinstance(value, str) or not value:
        return False
    if length is not None and len(value) != length:
        return False
    return bool(_HEX_RE.match(value))


__all__ = [
    "Digest",
    "DEFAULT_ALGORITHM",
    "SUPPORTED_ALGORITHMS",
    "sha256_hex",
    "get_digest",
    "hash_concat",
    "is_hex_digest",
]
