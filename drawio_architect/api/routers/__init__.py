"""API routers."""

from .diagrams import router as diagrams_router
from .health import router as health_router

__all__ = ["diagrams_router", "health_router"]
