"""API route handlers."""

from api.routes import health, merkle

__all__ = ["health", "merkle"]
