"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TracingConfig(BaseModel):
    """Diagnostic trace settings."""

    enabled: bool = True
    json_output: bool = False
    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {_LOG_LEVELS}, got {value!r}")
        return upper


class FilterDataConfig(BaseModel):
    """A filter-parameter dataset declared in configuration."""

    key: str = Field(..., min_length=1)
    data: Any = None


class PipelineConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    tracing: TracingConfig = Field(default_factory=TracingConfig)
    filter_data: List[FilterDataConfig] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
