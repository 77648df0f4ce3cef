"""
Configuration Package - Models and Loaders.

    - Pydantic models for type-safe configuration
    - YAML loader with validation and override merging

Configuration Structure:
    - PipelineConfig: Root configuration object
    - TracingConfig: Diagnostic trace toggle and rendering
    - FilterDataConfig: Static filter-parameter datasets
"""

from recommendation_pipeline.config.loader import ConfigLoader, load_config
from recommendation_pipeline.config.models import (
    FilterDataConfig,
    PipelineConfig,
    TracingConfig,
)

__all__ = [
    "ConfigLoader",
    "FilterDataConfig",
    "PipelineConfig",
    "TracingConfig",
    "load_config",
]
