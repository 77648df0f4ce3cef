"""
Sample Plugins.

Example filter-logic units and filter-data providers showing how the
plugin contract is used. They are not part of the engine.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, List, Sequence

from recommendation_pipeline.domain.entities import FilterDataEntry, ItemId
from recommendation_pipeline.filters.base import FilterLogic


def sample_filter_data_first() -> List[str]:
    """Sample dataset registered under ``"first"``."""
    return ["1data1", "2data1", "3data1"]


def sample_filter_data_second() -> List[str]:
    """Sample dataset registered under ``"second"``."""
    return ["1data2", "2data2", "3data2"]


class ExcludeItemsFilter(FilterLogic):
    """Remove a fixed set of item ids, keeping the order of the rest."""

    __slots__ = ("_excluded",)

    def __init__(self, excluded: Iterable[ItemId], label: str = "") -> None:
        excluded_set = frozenset(excluded)
        super().__init__(label or f"exclude {sorted(excluded_set)}")
        self._excluded = excluded_set

    @property
    def excluded(self) -> FrozenSet[ItemId]:
        return self._excluded

    def apply(
        self,
        filter_parameters: Sequence[FilterDataEntry],
        items: List[ItemId],
    ) -> List[ItemId]:
        return [item for item in items if item not in self._excluded]
