"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_diagram_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_diagram_service",
    "get_service_cache",
    "get_settings_dependency",
]
