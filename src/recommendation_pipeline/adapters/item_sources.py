"""
Item Sources.

Concrete providers of the item collection for a pipeline run.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional

from recommendation_pipeline.domain.entities import ItemId

logger = logging.getLogger(__name__)

# provide(done) where done(error, {"items": [...]})
DoneCallback = Callable[[Any, Optional[Mapping[str, Any]]], None]
CallbackProvider = Callable[[DoneCallback], None]

_ITEM_KEYS = ("items", "videoData")


class StaticItemSource:
    """Fixed in-memory item collection."""

    def __init__(self, items: Iterable[ItemId]) -> None:
        self._items = list(items)

    async def fetch_items(self) -> List[ItemId]:
        return list(self._items)


class CallbackItemSource:
    """
    Adapt a callback-style provider to ItemSourceProtocol.

    The provider is called with a ``done(error, payload)`` callback, where
    ``payload`` is a mapping holding the item list under ``"items"`` (or
    the legacy ``"videoData"`` key). ``done`` may be invoked synchronously
    or later from the event loop; only the first invocation counts.
    """

    def __init__(self, provide: CallbackProvider) -> None:
        self._provide = provide

    async def fetch_items(self) -> List[ItemId]:
        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()

        def done(
            error: Any,
            payload: Optional[Mapping[str, Any]] = None,
        ) -> None:
            if future.done():
                logger.warning("Item source completion callback invoked more than once")
                return
            if error is not None:
                if not isinstance(error, BaseException):
                    error = RuntimeError(str(error))
                future.set_exception(error)
                return
            try:
                future.set_result(self._extract_items(payload))
            except (TypeError, KeyError) as e:
                future.set_exception(e)

        self._provide(done)
        return await future

    @staticmethod
    def _extract_items(payload: Optional[Mapping[str, Any]]) -> List[ItemId]:
        if payload is None:
            raise TypeError("Item source completed without a payload")
        for key in _ITEM_KEYS:
            if key in payload:
                items = payload[key]
                if not isinstance(items, (list, tuple)):
                    raise TypeError(
                        f"Item source payload '{key}' must be a list, "
                        f"got {type(items).__name__}"
                    )
                return list(items)
        raise KeyError(f"Item source payload has none of the keys {_ITEM_KEYS}")
