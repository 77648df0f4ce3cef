"""
Exception Taxonomy.

    - PipelineError: base class for everything raised by the engine
    - AcquisitionError: gathering items or filter data failed (Phase 1)
    - TransformError: a filter-logic unit raised or returned a non-sequence
    - ConcurrentExecutionError: execute() re-entered on a busy engine
    - ConfigurationError: configuration could not be loaded or applied

Errors are never retried or partially recovered; they propagate to the
caller of the pipeline run.
"""

from __future__ import annotations

from typing import Optional


class PipelineError(Exception):
    """Base class for pipeline errors."""


class AcquisitionError(PipelineError):
    """Raised when an input-gathering task fails."""

    def __init__(self, message: str, task: Optional[str] = None) -> None:
        super().__init__(message)
        self.task = task
        self.message = message


class TransformError(PipelineError):
    """Raised when a filter-logic unit fails during execute()."""

    def __init__(
        self,
        message: str,
        label: Optional[str] = None,
        position: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.label = label
        self.position = position
        self.message = message


class ConcurrentExecutionError(PipelineError):
    """Raised when execute() is called while another run is in progress."""


class ConfigurationError(PipelineError):
    """Raised when configuration is invalid or cannot be applied."""
