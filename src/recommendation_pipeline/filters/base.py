"""
Filter Logic Base Unit.

A FilterLogic is one step of the pipeline. It is built either from a
label plus a transform callable, or by subclassing and overriding
``apply``. It is never modified after construction.

Without a transform and without an override, ``apply`` returns the items
it was given, so a plugin that does nothing is a safe no-op.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from recommendation_pipeline.domain.entities import FilterDataEntry, ItemId

Transform = Callable[[Sequence[FilterDataEntry], List[ItemId]], List[ItemId]]


class FilterLogic:
    """Named, immutable transform unit."""

    __slots__ = ("_label", "_transform")

    def __init__(self, label: str, transform: Optional[Transform] = None) -> None:
        """
        Initialize a filter-logic unit.

        Args:
            label: Diagnostic label shown in traces
            transform: Optional ``(filter_parameters, items) -> items`` callable
        """
        self._label = label
        self._transform = transform

    @property
    def label(self) -> str:
        """Diagnostic label; has no behavioral effect."""
        return self._label

    @property
    def transform(self) -> Optional[Transform]:
        return self._transform

    def apply(
        self,
        filter_parameters: Sequence[FilterDataEntry],
        items: List[ItemId],
    ) -> List[ItemId]:
        """
        Apply this unit to the item collection.

        Default behavior is the identity transform.
        """
        if self._transform is None:
            return items
        return self._transform(filter_parameters, items)

    def __repr__(self) -> str:
        kind = "identity" if self._transform is None else "transform"
        return f"{type(self).__name__}(label={self._label!r}, {kind})"
