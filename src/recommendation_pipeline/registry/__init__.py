"""
Registry Module - Filter Data Management.

Components:
    - FilterDataRegistry: Ordered store of named filter-parameter datasets
    - FilterDataRegistryProtocol: Read side consumed by the coordinator
"""

from recommendation_pipeline.registry.filter_data_registry import (
    FilterDataRegistry,
    FilterDataRegistryProtocol,
)

__all__ = [
    "FilterDataRegistry",
    "FilterDataRegistryProtocol",
]
