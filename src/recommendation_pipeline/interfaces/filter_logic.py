"""
Filter Logic Protocol.

Defines the structural interface for filter-logic plugins. Any object
with a ``label`` and an ``apply(filter_parameters, items)`` method can be
registered with the PipelineEngine.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - ``label`` is diagnostic only and never changes behavior
    - ``apply`` is synchronous; errors propagate to the engine
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from typing import List

    from recommendation_pipeline.domain.entities import FilterDataEntry, ItemId


@runtime_checkable
class FilterLogicProtocol(Protocol):
    """Abstract interface for filter-logic units."""

    @property
    def label(self) -> str:
        """Diagnostic label shown in traces."""
        ...

    def apply(
        self,
        filter_parameters: Sequence[FilterDataEntry],
        items: List[ItemId],
    ) -> List[ItemId]:
        """
        Transform the item collection.

        Args:
            filter_parameters: Registered filter data, in registration order
            items: Output of the previous step (or the initial items)

        Returns:
            The item collection handed to the next step
        """
        ...
