"""
Pipeline Engine - Ordered Filter Execution.

The engine holds an append-only list of filter-logic units and the
current PipelineState. ``execute`` is a strict left-to-right reduction:
each unit receives the previous unit's output, in registration order.

One engine instance serves one run at a time. Calling ``execute`` while
another call is still running raises ConcurrentExecutionError.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional, Sequence, Tuple

from recommendation_pipeline.adapters.tracer import DiagnosticTracer
from recommendation_pipeline.domain.entities import (
    FilterDataEntry,
    ItemId,
    PipelineRunResult,
    StepResult,
    find_invalid_item_ids,
)
from recommendation_pipeline.exceptions import ConcurrentExecutionError, TransformError
from recommendation_pipeline.interfaces.filter_logic import FilterLogicProtocol
from recommendation_pipeline.observability.logging import get_correlation_id

logger = logging.getLogger(__name__)


@dataclass
class PipelineState:
    """Mutable state threaded through one run."""

    items: List[ItemId] = field(default_factory=list)
    filter_parameters: Tuple[FilterDataEntry, ...] = ()


def _snapshot(items: Sequence[Any]) -> str:
    return json.dumps(list(items), default=str)


class PipelineEngine:
    """Executes registered filter-logic units in registration order."""

    def __init__(self, tracer: Optional[DiagnosticTracer] = None) -> None:
        """
        Initialize engine.

        Args:
            tracer: Diagnostic trace sink (default: structlog-backed tracer)
        """
        self._tracer = tracer or DiagnosticTracer()
        self._logic_units: List[FilterLogicProtocol] = []
        self._state = PipelineState()
        self._last_run: Optional[PipelineRunResult] = None
        self._running = False

    @property
    def logic_units(self) -> Tuple[FilterLogicProtocol, ...]:
        """Registered units in execution order."""
        return tuple(self._logic_units)

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def last_run(self) -> Optional[PipelineRunResult]:
        """Report of the most recent successful run."""
        return self._last_run

    def register_logic(self, unit: FilterLogicProtocol) -> None:
        """
        Append a filter-logic unit. Registration order is execution order.

        Raises:
            TypeError: If ``unit`` lacks ``label`` or ``apply``
        """
        if not isinstance(unit, FilterLogicProtocol):
            raise TypeError(
                f"{type(unit).__name__} does not implement the filter logic "
                f"contract (label + apply)"
            )
        self._logic_units.append(unit)
        logger.info(
            f"Registered filter logic #{len(self._logic_units) - 1}: {unit.label}"
        )

    def set_parameters(
        self,
        items: Sequence[ItemId],
        filter_parameters: Sequence[FilterDataEntry],
    ) -> None:
        """
        Replace the pipeline state for the next run.

        Args:
            items: Initial item collection
            filter_parameters: Filter data handed unchanged to every unit

        Raises:
            TypeError: If any item id is not a string
        """
        invalid = find_invalid_item_ids(items)
        if invalid:
            raise TypeError(
                f"Item ids must be strings, got {len(invalid)} invalid, "
                f"e.g. {invalid[0]!r}"
            )
        self._state = PipelineState(
            items=list(items),
            filter_parameters=tuple(filter_parameters),
        )
        logger.debug(
            f"Parameters set: {len(self._state.items)} items, "
            f"{len(self._state.filter_parameters)} filter data entries"
        )

    def execute(self) -> List[ItemId]:
        """
        Run every unit in order and return the final item collection.

        Returns only after the last unit has run. Without a prior
        ``set_parameters`` the run starts from an empty collection.

        Raises:
            TransformError: If a unit raises or returns a non-sequence
            ConcurrentExecutionError: If a run is already in progress
        """
        return list(self.execute_with_report().items)

    def execute_with_report(self) -> PipelineRunResult:
        """Like ``execute`` but return the full run report."""
        if self._running:
            raise ConcurrentExecutionError(
                "PipelineEngine.execute() is already running on this instance"
            )
        self._running = True
        try:
            report = self._run()
        finally:
            self._running = False
        self._last_run = report
        return report

    def _run(self) -> PipelineRunResult:
        start_time = time.perf_counter()
        initial_items = list(self._state.items)
        steps: List[StepResult] = []

        self._tracer.trace(f"original = {_snapshot(initial_items)}")

        for position, unit in enumerate(tuple(self._logic_units)):
            step = self._execute_step(unit, position)
            steps.append(step)

        final_items = list(self._state.items)
        self._tracer.trace(f"final = {_snapshot(final_items)}")

        duration = time.perf_counter() - start_time
        logger.info(
            f"Pipeline run finished: {len(initial_items)} -> {len(final_items)} "
            f"items through {len(steps)} units ({duration:.3f}s)"
        )

        return PipelineRunResult(
            initial_items=initial_items,
            items=final_items,
            steps=steps,
            metadata={
                "correlation_id": get_correlation_id(),
                "timestamp": datetime.now().isoformat(),
                "duration_seconds": duration,
            },
        )

    def _execute_step(self, unit: FilterLogicProtocol, position: int) -> StepResult:
        """Apply one unit and overwrite the state's items with its output."""
        items = self._state.items
        label = unit.label
        step_start = time.perf_counter()

        self._tracer.trace(f"executing {label}")

        try:
            result = unit.apply(self._state.filter_parameters, list(items))
        except (ConcurrentExecutionError, TransformError):
            raise
        except Exception as e:
            raise TransformError(
                f"Filter logic '{label}' (#{position}) failed: {e}",
                label=label,
                position=position,
            ) from e

        if not isinstance(result, (list, tuple)):
            raise TransformError(
                f"Filter logic '{label}' (#{position}) returned "
                f"{type(result).__name__}, expected a list of items",
                label=label,
                position=position,
            )

        invalid = find_invalid_item_ids(result)
        if invalid:
            raise TransformError(
                f"Filter logic '{label}' (#{position}) returned "
                f"{len(invalid)} non-string item ids, e.g. {invalid[0]!r}",
                label=label,
                position=position,
            )

        self._state.items = list(result)
        self._tracer.trace(f"output = {_snapshot(self._state.items)}")

        return StepResult(
            label=label,
            position=position,
            input_count=len(items),
            output_count=len(self._state.items),
            duration_seconds=time.perf_counter() - step_start,
        )

    def __repr__(self) -> str:
        return (
            f"PipelineEngine(units={len(self._logic_units)}, "
            f"items={len(self._state.items)})"
        )
