"""
Value Objects for the Domain Layer.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from recommendation_pipeline.domain.entities import FilterDataEntry, ItemId


class GatheredInputs(BaseModel):
    """Items and filter parameters assembled by the gather phase."""

    items: List[ItemId] = Field(default_factory=list)
    filter_parameters: List[FilterDataEntry] = Field(default_factory=list)

    model_config = {"frozen": True}
