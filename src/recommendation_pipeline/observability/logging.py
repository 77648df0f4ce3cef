"""
Structured Logging Setup.

Provides:
    - structlog configuration (JSON or console rendering)
    - Correlation ID propagation through contextvars

Design Notes:
    - Correlation id is stored in a ContextVar so concurrent asyncio
      tasks each see their own run
    - structlog.contextvars merges it into every trace entry
"""

from __future__ import annotations

import logging
import uuid
from contextvars import ContextVar
from typing import Optional

import structlog

from recommendation_pipeline.config.models import TracingConfig

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def new_correlation_id() -> str:
    """Generate a fresh correlation ID."""
    return str(uuid.uuid4())


def bind_run_context(correlation_id: str) -> None:
    """
    Set correlation ID for the current run.

    Args:
        correlation_id: Unique ID for tracing one pipeline run
    """
    _correlation_id.set(correlation_id)
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_run_context() -> None:
    """Forget the current run's correlation ID."""
    _correlation_id.set(None)
    structlog.contextvars.clear_contextvars()


def configure_structlog(config: Optional[TracingConfig] = None) -> None:
    """
    Configure structlog for trace output.

    Args:
        config: Tracing settings; defaults to TracingConfig()
    """
    config = config or TracingConfig()
    level = logging.getLevelName(config.level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
