"""
JSON Presenter.

Receives the final item collection of a successful run as a serialized
snapshot. Display itself is left to the writer callable.
"""

from __future__ import annotations

import json
from typing import Callable, List, Optional

from recommendation_pipeline.domain.entities import ItemId


class JsonPresenter:
    """Serialize the final item collection and hand it to a writer."""

    def __init__(self, writer: Optional[Callable[[str], None]] = None) -> None:
        self._writer = writer or print

    def present(self, items: List[ItemId]) -> str:
        snapshot = json.dumps(list(items))
        self._writer(snapshot)
        return snapshot
