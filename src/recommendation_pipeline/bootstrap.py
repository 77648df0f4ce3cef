"""
Bootstrap - Wire Components from Configuration.

Builds the registry, engine, tracer and coordinator as explicit objects
that callers hold and pass around; nothing is stored at module level.

Usage:
    components = create_pipeline(
        config_path="config/pipeline.yaml",
        item_source=StaticItemSource(["vid1", "vid2", "vid3"]),
    )
    components.engine.register_logic(ExcludeItemsFilter(["vid2"]))
    items = components.coordinator.run_sync()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from recommendation_pipeline.adapters.presenter import JsonPresenter
from recommendation_pipeline.adapters.tracer import DiagnosticTracer, TraceSink
from recommendation_pipeline.config.loader import load_config
from recommendation_pipeline.config.models import PipelineConfig
from recommendation_pipeline.exceptions import ConfigurationError
from recommendation_pipeline.interfaces.item_source import ItemSourceProtocol
from recommendation_pipeline.observability.logging import configure_structlog
from recommendation_pipeline.pipeline.coordinator import AcquisitionCoordinator
from recommendation_pipeline.pipeline.engine import PipelineEngine
from recommendation_pipeline.registry.filter_data_registry import FilterDataRegistry

logger = logging.getLogger(__name__)


@dataclass
class PipelineComponents:
    """Everything a caller needs to register plugins and run the pipeline."""

    config: PipelineConfig
    filter_data_registry: FilterDataRegistry
    engine: PipelineEngine
    tracer: DiagnosticTracer
    coordinator: AcquisitionCoordinator


def create_pipeline(
    item_source: ItemSourceProtocol,
    config: Optional[PipelineConfig] = None,
    config_path: Optional[Union[str, Path]] = None,
    trace_sink: Optional[TraceSink] = None,
    presenter: Optional[JsonPresenter] = None,
) -> PipelineComponents:
    """
    Create a ready-to-use pipeline.

    Args:
        item_source: Collaborator supplying items for each run
        config: Configuration object (takes precedence over config_path)
        config_path: YAML file to load when no config object is given
        trace_sink: Custom sink for diagnostic traces (default: structlog)
        presenter: Optional receiver of successful results

    Returns:
        PipelineComponents with configured filter data registered

    Raises:
        ConfigurationError: If both config and config_path are given
    """
    if config is not None and config_path is not None:
        raise ConfigurationError("Pass either config or config_path, not both")
    if config is None:
        config = load_config(config_path) if config_path else PipelineConfig()

    if trace_sink is None:
        configure_structlog(config.tracing)
    tracer = DiagnosticTracer(sink=trace_sink, enabled=config.tracing.enabled)

    registry = FilterDataRegistry()
    registered = registry.register_from_config(config.filter_data)

    engine = PipelineEngine(tracer=tracer)
    coordinator = AcquisitionCoordinator(
        item_source=item_source,
        filter_data_registry=registry,
        engine=engine,
        presenter=presenter,
    )

    logger.info(
        f"Pipeline created: {registered} configured filter data entries, "
        f"tracing {'on' if tracer.enabled else 'off'}"
    )
    return PipelineComponents(
        config=config,
        filter_data_registry=registry,
        engine=engine,
        tracer=tracer,
        coordinator=coordinator,
    )
