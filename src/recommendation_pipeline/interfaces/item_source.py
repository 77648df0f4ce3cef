"""
Item Source Protocol.

Defines the interface for the collaborator that supplies the item
collection (e.g. video ids) for one pipeline run. It is called once per
run during the gather phase and may perform I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import List

    from recommendation_pipeline.domain.entities import ItemId


@runtime_checkable
class ItemSourceProtocol(Protocol):
    """Abstract interface for item acquisition."""

    async def fetch_items(self) -> List[ItemId]:
        """
        Fetch the item collection for a run.

        Raises:
            Exception: Any failure; the coordinator wraps it in AcquisitionError
        """
        ...
