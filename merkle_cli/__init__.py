"""
Merkle CLI

Command-line interface for building Merkle trees and inclusion proofs.

Usage:
    python -m merkle_cli tree --file leaves.txt
    python -m merkle_cli root <leaf> <leaf> ...
    python -m merkle_cli proof <target> --file leaves.txt --json > proof.json
    python -m merkle_cli verify --proof proof.json --root <root>
    python -m merkle_cli config --init
"""

__version__ = "0.1.0"
