"""
Adapters Package - Collaborator Implementations.

Item Sources:
    - StaticItemSource: Fixed in-memory item list
    - CallbackItemSource: Wraps a callback-style provider

Diagnostics:
    - DiagnosticTracer: Single-argument trace sink with on/off toggle
    - ConsoleTraceSink: Timestamped console output
    - RecordingTraceSink: In-memory capture of trace lines

Presentation:
    - JsonPresenter: Serializes the final item collection
"""

from recommendation_pipeline.adapters.item_sources import (
    CallbackItemSource,
    StaticItemSource,
)
from recommendation_pipeline.adapters.presenter import JsonPresenter
from recommendation_pipeline.adapters.tracer import (
    ConsoleTraceSink,
    DiagnosticTracer,
    RecordingTraceSink,
)

__all__ = [
    "CallbackItemSource",
    "ConsoleTraceSink",
    "DiagnosticTracer",
    "JsonPresenter",
    "RecordingTraceSink",
    "StaticItemSource",
]
