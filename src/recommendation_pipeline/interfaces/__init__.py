"""
Interfaces Layer - Protocols for Plugins and Collaborators.

High-level modules depend on these abstractions, not on concrete
implementations.

Protocols:
    - FilterLogicProtocol: One transform step of the pipeline
    - ItemSourceProtocol: Provider of the item collection for a run
"""

from recommendation_pipeline.interfaces.filter_logic import FilterLogicProtocol
from recommendation_pipeline.interfaces.item_source import ItemSourceProtocol

__all__ = ["FilterLogicProtocol", "ItemSourceProtocol"]
