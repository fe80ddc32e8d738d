"""
Minimal API (FastAPI)

HTTP API for Merkle trees and inclusion proofs:
- POST /tree - All tree levels
- POST /root - Merkle root
- POST /proof - Inclusion proof
- POST /verify - Verify a proof against a root
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
