"""
Diagnostic Tracer.

The engine writes human-readable trace lines (``original = [...]``,
``executing <label>``, ``output = [...]``, ``final = [...]``) to a single
argument sink. Tracing can be switched off without touching any caller.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

import structlog

from recommendation_pipeline.observability.logging import get_correlation_id

TraceSink = Callable[[str], None]


class ConsoleTraceSink:
    """Simple console sink with timestamp and correlation prefix."""

    def __call__(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        correlation_id = get_correlation_id()
        corr_id = correlation_id[:8] if correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] {message}")


class DiagnosticTracer:
    """Forward trace messages to a sink unless disabled."""

    def __init__(self, sink: Optional[TraceSink] = None, enabled: bool = True) -> None:
        """
        Initialize tracer.

        Args:
            sink: Single-argument callable; defaults to a structlog logger
            enabled: If False, every message is dropped
        """
        if sink is None:
            sink = structlog.get_logger("recommendation_pipeline.trace").info
        self._sink = sink
        self.enabled = enabled

    def trace(self, message: str) -> None:
        if self.enabled:
            self._sink(message)


class RecordingTraceSink:
    """Sink that keeps every message; used by tests and debugging sessions."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)
