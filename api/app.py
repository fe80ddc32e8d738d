"""
FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.routes import health, merkle
from api.errors import (
    APIError,
    api_error_handler,
    generic_error_handler,
    merkle_error_handler,
    validation_error_handler,
)
from core.config.runtime import get_default_config
from core.schemas.errors import MerkleException


def _resolve_log_level() -> int:
    """Resolve log level from MERKLE_LOG_LEVEL or merkle.json, defaulting to INFO."""
    raw = get_default_config().logging.level
    return getattr(logging, (raw or "INFO").upper(), logging.INFO)


logging.basicConfig(
    level=_resolve_log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Merkle Paths API",
        description="""
HTTP API for binary Merkle trees and inclusion proofs.

## Endpoints

- **POST /tree** - Build every level of the tree
- **POST /root** - Compute the Merkle root
- **POST /proof** - Build an inclusion proof for a leaf
- **POST /verify** - Verify a proof against a trusted root
- **GET /health** - Health check

## Hashing

Parents are `digest(left + right)` over the children's hex strings.
Odd levels duplicate their last node. A single leaf is its own root.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(MerkleException, merkle_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(merkle.router)

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
