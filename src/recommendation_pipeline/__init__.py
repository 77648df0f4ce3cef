"""
Recommendation Pipeline - Pluggable Item Filtering.

A small orchestration engine that threads a collection of item ids
(e.g. video ids) through an ordered list of filter-logic plugins. New
filtering rules and new filter-parameter data are added by registering
plugins, never by editing the orchestration code.

Main Components:
    - registry: FilterDataRegistry holding named filter-parameter datasets
    - filters: FilterLogic plugin contract and sample plugins
    - pipeline: PipelineEngine (ordered reduction) and
      AcquisitionCoordinator (gather inputs, then run the engine)
    - adapters: Item sources, diagnostic tracer, presentation
    - config: Pydantic configuration models and YAML loader

Example:
    >>> from recommendation_pipeline.bootstrap import create_pipeline
    >>> from recommendation_pipeline.adapters.item_sources import StaticItemSource
    >>> components = create_pipeline(item_source=StaticItemSource(["vid1", "vid2"]))
    >>> from recommendation_pipeline.filters import ExcludeItemsFilter
    >>> components.engine.register_logic(ExcludeItemsFilter(["vid2"]))
    >>> components.coordinator.run_sync()
    ['vid1']
"""

import logging

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure stdlib logging for Recommendation Pipeline.

    Call this at application startup to see library log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("recommendation_pipeline").setLevel(level)
