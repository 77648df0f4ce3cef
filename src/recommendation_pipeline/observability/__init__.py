"""
Observability Package - Structured Logging and Correlation IDs.

Components:
    - configure_structlog: structlog processor chain setup
    - bind_run_context / new_correlation_id: per-run correlation ids
"""

from recommendation_pipeline.observability.logging import (
    bind_run_context,
    clear_run_context,
    configure_structlog,
    get_correlation_id,
    new_correlation_id,
)

__all__ = [
    "bind_run_context",
    "clear_run_context",
    "configure_structlog",
    "get_correlation_id",
    "new_correlation_id",
]
