"""
Acquisition Coordinator - Gather, then Apply.

Runs a pipeline in two strictly chained phases:

    1. Gather: fetch the item collection and list the filter data as two
       concurrent asyncio tasks. Both must finish (join, not race). A
       failure in either cancels the other and aborts the run.
    2. Apply: hand the joined pair to PipelineEngine.set_parameters,
       run PipelineEngine.execute, and pass the final items on.

There are no retries and no timeouts; the first error ends the run.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from recommendation_pipeline.adapters.presenter import JsonPresenter
from recommendation_pipeline.domain.entities import (
    FilterDataEntry,
    ItemId,
    find_invalid_item_ids,
)
from recommendation_pipeline.domain.value_objects import GatheredInputs
from recommendation_pipeline.exceptions import AcquisitionError, PipelineError
from recommendation_pipeline.interfaces.item_source import ItemSourceProtocol
from recommendation_pipeline.observability.logging import (
    bind_run_context,
    clear_run_context,
    new_correlation_id,
)
from recommendation_pipeline.pipeline.engine import PipelineEngine
from recommendation_pipeline.registry.filter_data_registry import (
    FilterDataRegistryProtocol,
)

logger = logging.getLogger(__name__)

CompletionHandler = Callable[[Optional[PipelineError], Optional[List[ItemId]]], None]


class AcquisitionCoordinator:
    """Two-phase orchestrator around a PipelineEngine."""

    def __init__(
        self,
        item_source: ItemSourceProtocol,
        filter_data_registry: FilterDataRegistryProtocol,
        engine: PipelineEngine,
        presenter: Optional[JsonPresenter] = None,
    ) -> None:
        """
        Initialize coordinator with its collaborators.

        Args:
            item_source: Supplies the item collection once per run
            filter_data_registry: Supplies the filter parameters
            engine: Engine executing the filter-logic units
            presenter: Optional receiver of successful results
        """
        self.item_source = item_source
        self.filter_data_registry = filter_data_registry
        self.engine = engine
        self.presenter = presenter

    async def gather(self) -> GatheredInputs:
        """
        Phase 1: fetch items and filter data concurrently.

        Raises:
            AcquisitionError: If either task fails
        """
        tasks = [
            asyncio.ensure_future(self._fetch_items()),
            asyncio.ensure_future(self._fetch_filter_data()),
        ]
        try:
            items, filter_parameters = await asyncio.gather(*tasks)
        except BaseException:
            pending = [t for t in tasks if not t.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            raise

        logger.debug(
            f"Gathered {len(items)} items and "
            f"{len(filter_parameters)} filter data entries"
        )
        return GatheredInputs(items=items, filter_parameters=filter_parameters)

    def apply(self, inputs: GatheredInputs) -> List[ItemId]:
        """
        Phase 2: load the gathered pair into the engine and execute it.

        Raises:
            TransformError: If a filter-logic unit fails
        """
        self.engine.set_parameters(inputs.items, inputs.filter_parameters)
        return self.engine.execute()

    async def run(self) -> List[ItemId]:
        """
        Run both phases and return the final item collection.

        The presenter, if any, only sees successful results.

        Raises:
            AcquisitionError: If the gather phase fails
            TransformError: If the apply phase fails
        """
        correlation_id = new_correlation_id()
        bind_run_context(correlation_id)
        logger.info(f"Pipeline run started: {correlation_id}")
        try:
            inputs = await self.gather()
            items = self.apply(inputs)
        except PipelineError as e:
            logger.error(f"Pipeline run {correlation_id} failed: {e}")
            raise
        finally:
            clear_run_context()

        if self.presenter is not None:
            self.presenter.present(items)
        return items

    async def run_with_callback(self, done: CompletionHandler) -> Optional[List[ItemId]]:
        """
        Run both phases and report through a ``done(error, items)`` handler.

        ``done`` is called exactly once: with ``(error, None)`` for the
        first error of either phase, or ``(None, items)`` on success.
        """
        try:
            items = await self.run()
        except PipelineError as e:
            done(e, None)
            return None
        done(None, items)
        return items

    def run_sync(self) -> List[ItemId]:
        """Run the pipeline from synchronous code."""
        return asyncio.run(self.run())

    async def _fetch_items(self) -> List[ItemId]:
        try:
            items = await self.item_source.fetch_items()
        except Exception as e:
            raise AcquisitionError(
                f"Item source failed: {e}", task="items"
            ) from e

        if not isinstance(items, (list, tuple)):
            raise AcquisitionError(
                f"Item source returned {type(items).__name__}, expected a list",
                task="items",
            )

        invalid = find_invalid_item_ids(items)
        if invalid:
            raise AcquisitionError(
                f"Item source returned {len(invalid)} non-string item ids, "
                f"e.g. {invalid[0]!r}",
                task="items",
            )
        return list(items)

    async def _fetch_filter_data(self) -> List[FilterDataEntry]:
        try:
            return list(self.filter_data_registry.list())
        except Exception as e:
            raise AcquisitionError(
                f"Filter data listing failed: {e}", task="filter_data"
            ) from e
