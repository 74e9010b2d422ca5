"""
Observability module.

Provides structured logging configuration, correlation ID tracking and
request logging middleware.
"""

from tourbook.observability.correlation import get_correlation_id, set_correlation_id
from tourbook.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
