"""
Pytest Configuration and Shared Fixtures.
"""

from __future__ import annotations

from typing import List

import pytest

from recommendation_pipeline.adapters.item_sources import StaticItemSource
from recommendation_pipeline.adapters.tracer import DiagnosticTracer, RecordingTraceSink
from recommendation_pipeline.filters.samples import (
    sample_filter_data_first,
    sample_filter_data_second,
)
from recommendation_pipeline.pipeline.coordinator import AcquisitionCoordinator
from recommendation_pipeline.pipeline.engine import PipelineEngine
from recommendation_pipeline.registry.filter_data_registry import FilterDataRegistry


@pytest.fixture
def sample_items() -> List[str]:
    """The sample video ids."""
    return ["vid1", "vid2", "vid3"]


@pytest.fixture
def trace_sink() -> RecordingTraceSink:
    """Sink capturing trace lines."""
    return RecordingTraceSink()


@pytest.fixture
def tracer(trace_sink: RecordingTraceSink) -> DiagnosticTracer:
    """Enabled tracer writing to the recording sink."""
    return DiagnosticTracer(sink=trace_sink, enabled=True)


@pytest.fixture
def engine(tracer: DiagnosticTracer) -> PipelineEngine:
    """Empty engine with a recording tracer."""
    return PipelineEngine(tracer=tracer)


@pytest.fixture
def filter_data_registry() -> FilterDataRegistry:
    """Registry holding the two sample datasets."""
    registry = FilterDataRegistry()
    registry.register_provider("first", sample_filter_data_first)
    registry.register_provider("second", sample_filter_data_second)
    return registry


@pytest.fixture
def coordinator(
    sample_items: List[str],
    filter_data_registry: FilterDataRegistry,
    engine: PipelineEngine,
) -> AcquisitionCoordinator:
    """Coordinator over the sample items and sample filter data."""
    return AcquisitionCoordinator(
        item_source=StaticItemSource(sample_items),
        filter_data_registry=filter_data_registry,
        engine=engine,
    )
