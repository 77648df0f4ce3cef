"""
Filters Package - Filter Logic Plugins.

Filters:
    - FilterLogic: Base unit; identity unless given a transform or overridden
    - ExcludeItemsFilter: Removes a fixed set of item ids

Sample Filter Data Providers:
    - sample_filter_data_first
    - sample_filter_data_second
"""

from recommendation_pipeline.filters.base import FilterLogic, Transform
from recommendation_pipeline.filters.samples import (
    ExcludeItemsFilter,
    sample_filter_data_first,
    sample_filter_data_second,
)

__all__ = [
    "ExcludeItemsFilter",
    "FilterLogic",
    "Transform",
    "sample_filter_data_first",
    "sample_filter_data_second",
]
