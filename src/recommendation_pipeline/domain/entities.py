"""
Core Domain Entities.

This module defines the entities the engine operates on. Items are
opaque string ids; the engine never looks inside them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, Field

# Opaque identifier of a recommendable entity (e.g. a video id)
ItemId = str


class FilterDataEntry(BaseModel):
    """A named filter-parameter dataset held by the FilterDataRegistry."""

    key: str = Field(..., description="Name of the dataset")
    data: Any = Field(default=None, description="Opaque dataset value")

    model_config = {"frozen": True}

    def as_mapping(self) -> Dict[str, Any]:
        """Single-key ``{key: data}`` view of the entry."""
        return {self.key: self.data}


class StepResult(BaseModel):
    """Result of applying a single filter-logic unit."""

    label: str
    position: int = Field(ge=0)
    input_count: int = Field(ge=0)
    output_count: int = Field(ge=0)
    duration_seconds: float = Field(ge=0)

    @property
    def removed_count(self) -> int:
        """Number of items dropped by this step (negative if items were added)."""
        return self.input_count - self.output_count


class PipelineRunResult(BaseModel):
    """Complete result of one pipeline run."""

    initial_items: List[ItemId] = Field(default_factory=list)
    items: List[ItemId] = Field(default_factory=list)
    steps: List[StepResult] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def total_removed(self) -> int:
        return len(self.initial_items) - len(self.items)


def find_invalid_item_ids(items: Sequence[Any]) -> List[Any]:
    """Return the elements of ``items`` that are not string item ids."""
    return [item for item in items if not isinstance(item, str)]
