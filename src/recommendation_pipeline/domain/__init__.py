"""
Domain Layer - Entities and Value Objects of a pipeline run.

Entities:
    - FilterDataEntry: One named filter-parameter dataset
    - PipelineRunResult: Complete result of a pipeline run

Value Objects:
    - GatheredInputs: Items and filter parameters joined in Phase 1
    - StepResult: Per-unit record of one reduction step
"""

from recommendation_pipeline.domain.entities import (
    FilterDataEntry,
    ItemId,
    PipelineRunResult,
    StepResult,
    find_invalid_item_ids,
)
from recommendation_pipeline.domain.value_objects import GatheredInputs

__all__ = [
    "FilterDataEntry",
    "GatheredInputs",
    "ItemId",
    "PipelineRunResult",
    "StepResult",
    "find_invalid_item_ids",
]
