"""
Health Check Route

Liveness endpoint that also reports which digests the service accepts
and whether tree caching is on.
"""

from fastapi import APIRouter

from api import __version__
from api.deps import get_runtime_config
from api.models.responses import HealthResponse
from core.crypto.hashing import SUPPORTED_ALGORITHMS


router = APIRouter(tags=["health"])


def _health() -> HealthResponse:
    config = get_runtime_config()
    return HealthResponse(
        version=__version__,
        default_algorithm=config.tree.hash_algorithm,
        algorithms=sorted(SUPPORTED_ALGORITHMS),
        cache_enabled=config.cache.enabled,
    )


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Service status for liveness probes."""
    return _health()


@router.get("/", response_model=HealthResponse, include_in_schema=False)
def index() -> HealthResponse:
    return _health()
