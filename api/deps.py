"""
API Dependencies

Dependency injection for the API.
Provides the runtime configuration and per-algorithm tree caches.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from core.config.runtime import RuntimeConfig, get_default_config
from core.crypto.hashing import get_digest
from core.merkle.tree_cache import MerkleTreeCache

logger = logging.getLogger(__name__)


def get_runtime_config() -> RuntimeConfig:
    """
    Runtime config: ./merkle.json, ./.merkle.json, then
    ~/.config/merkle/config.json, with MERKLE_* env vars on top.
    """
    return get_default_config()


@lru_cache(maxsize=None)
def _cache_for(algorithm: str, max_entries: int) -> MerkleTreeCache:
    logger.info(f"Creating tree cache for {algorithm} (max_entries={max_entries})")
    return MerkleTreeCache(max_entries=max_entries, digest=get_digest(algorithm))


def get_tree_cache(algorithm: str | None = None) -> MerkleTreeCache:
    """
    Tree cache for one digest algorithm, the configured one when None.

    When caching is disabled in config the returned cache holds nothing
    and simply builds trees on demand.

    Raises:
        InvalidArgumentException: If the algorithm is not supported
    """
    config = get_runtime_config()
    algorithm = algorithm or config.tree.hash_algorithm
    get_digest(algorithm)  # rejects unsupported names before caching
    max_entries = config.cache.max_entries if config.cache.enabled else 0
    return _cache_for(algorithm.strip().lower().replace("-", "_"), max_entries)


def reset_tree_caches() -> None:
    """Drop every cache instance (used by tests and config reloads)."""
    _cache_for.cache_clear()
