"""
Leaf Input Loading

Collects leaf hashes from positional arguments, a file, or stdin.

File format: one hash per line. Blank lines and lines starting with
'#' are ignored; surrounding whitespace is stripped.
"""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path
from typing import Iterable, TextIO

from core.crypto.hashing import Digest, get_digest
from core.config.runtime import RuntimeConfig
from core.schemas.errors import InvalidArgumentException


def parse_leaf_lines(lines: Iterable[str]) -> list[str]:
    """Parse leaf hashes from text lines."""
    leaves: list[str] = []
    for line in lines:
        value = line.strip()
        if not value or value.startswith("#"):
            continue
        leaves.append(value)
    return leaves


def read_leaf_file(path: str, stdin: TextIO | None = None) -> list[str]:
    """
    Read leaf hashes from a file, or from stdin when path is '-'.

    Raises:
        InvalidArgumentException: If the file does not exist
    """
    if path == "-":
        return parse_leaf_lines(stdin or sys.stdin)

    file_path = Path(path)
    if not file_path.is_file():
        raise InvalidArgumentException(f"Leaf file not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        return parse_leaf_lines(f)


def load_leaves(args: Namespace) -> list[str]:
    """
    Collect leaves from parsed arguments.

    Positional leaves come first, then any leaves read from --file.
    """
    leaves = list(getattr(args, "leaves", None) or [])
    leaf_file = getattr(args, "file", None)
    if leaf_file:
        leaves.extend(read_leaf_file(leaf_file))
    return leaves


def resolve_digest(args: Namespace) -> Digest:
    """Digest from --algorithm, falling back to the loaded configuration."""
    algorithm = getattr(args, "algorithm", None)
    if algorithm:
        return get_digest(algorithm)
    config: RuntimeConfig = getattr(args, "runtime_config", None) or RuntimeConfig()
    return config.tree.digest()
