"""
Controllers package

Contains FastAPI route controllers:
- faucet_controller: Catalog listing and submission endpoints
- health_controller: Liveness endpoint
"""

from .faucet_controller import router as faucet_router
from .health_controller import router as health_router

__all__ = ["faucet_router", "health_router"]
