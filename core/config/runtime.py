"""
Runtime Configuration

Central configuration for tree construction, caching and logging.
"""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from core.crypto.hashing import DEFAULT_ALGORITHM, Digest, get_digest

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "MERKLE_"

# Config file search order
CONFIG_SEARCH_PATHS: tuple[Path, ...] = (
    Path("merkle.json"),
    Path(".merkle.json"),
    Path.home() / ".config" / "merkle" / "config.json",
)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class TreeConfig:
    """Configuration for tree construction."""
    hash_algorithm: str = DEFAULT_ALGORITHM

    def digest(self) -> Digest:
        """Resolve the configured digest function."""
        return get_digest(self.hash_algorithm)


@dataclass
class CacheConfig:
    """Configuration for the tree cache."""
    enabled: bool = False
    max_entries: int = 128


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - JSON file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - MERKLE_HASH_ALGORITHM: Digest algorithm name
        - MERKLE_CACHE_ENABLED: Enable the tree cache (true/false)
        - MERKLE_CACHE_MAX_ENTRIES: Maximum cached trees
        - MERKLE_LOG_LEVEL: Log level
        - MERKLE_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_ALGORITHM"):
            overrides.setdefault("tree", {})["hash_algorithm"] = os.getenv(
                f"{ENV_PREFIX}HASH_ALGORITHM"
            )

        if os.getenv(f"{ENV_PREFIX}CACHE_ENABLED"):
            overrides.setdefault("cache", {})["enabled"] = _env_bool(
                f"{ENV_PREFIX}CACHE_ENABLED"
            )
        if os.getenv(f"{ENV_PREFIX}CACHE_MAX_ENTRIES"):
            overrides.setdefault("cache", {})["max_entries"] = int(
                os.getenv(f"{ENV_PREFIX}CACHE_MAX_ENTRIES", "128")
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(
                f"{ENV_PREFIX}LOG_LEVEL"
            )
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(
                f"{ENV_PREFIX}LOG_FILE"
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        tree_data = data.get("tree", {})
        cache_data = data.get("cache", {})
        logging_data = data.get("logging", {})

        return cls(
            tree=TreeConfig(**tree_data) if tree_data else TreeConfig(),
            cache=CacheConfig(**cache_data) if cache_data else CacheConfig(),
            logging=LoggingConfig(**logging_data) if logging_data else LoggingConfig(),
            extra=data.get("extra", {}),
        )

    @classmethod
    def load(cls, path: str | Path | None = None) -> "RuntimeConfig":
        """
        Load from an explicit file, else the first file found on the
        search path, else defaults; then overlay environment variables.
        """
        if path is not None:
            return cls.from_file(path).with_env_overrides()

        for candidate in CONFIG_SEARCH_PATHS:
            if candidate.exists():
                return cls.from_file(candidate).with_env_overrides()

        return cls().with_env_overrides()

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for section, values in overrides.items():
            target = getattr(new_config, section)
            for key, value in values.items():
                setattr(target, key, value)

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "hash_algorithm": self.tree.hash_algorithm,
            },
            "cache": {
                "enabled": self.cache.enabled,
                "max_entries": self.cache.max_entries,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "extra": self.extra,
        }


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.load()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets it)."""
    global _default_config
    _default_config = config
