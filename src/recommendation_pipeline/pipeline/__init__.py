"""
Pipeline Package - Orchestration.

Components:
    - PipelineEngine: Ordered reduction of items through filter-logic units
    - AcquisitionCoordinator: Gather inputs concurrently, then run the engine

The two phases are chained strictly: the engine never runs before both
the item collection and the filter parameters are available.
"""

from recommendation_pipeline.pipeline.coordinator import AcquisitionCoordinator
from recommendation_pipeline.pipeline.engine import PipelineEngine, PipelineState

__all__ = ["AcquisitionCoordinator", "PipelineEngine", "PipelineState"]
