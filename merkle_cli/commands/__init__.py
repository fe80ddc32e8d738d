"""
CLI command modules.
"""

from merkle_cli.commands import tree, root, proof, verify

__all__ = ["tree", "root", "proof", "verify"]
