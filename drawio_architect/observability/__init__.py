"""
Observability module.

Provides structured logging, correlation ID tracking and request middleware.
"""

from drawio_architect.observability.correlation import get_correlation_id, set_correlation_id
from drawio_architect.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
