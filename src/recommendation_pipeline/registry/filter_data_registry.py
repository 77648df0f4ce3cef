"""
Filter Data Registry - Named Filter-Parameter Datasets.

The registry is an ordered, append-only sequence of FilterDataEntry.
Registering the same key twice keeps both entries; nothing is merged or
overwritten, and iteration order is insertion order.

Usage:
    registry = FilterDataRegistry()
    registry.register("first", ["1data1", "2data1", "3data1"])
    registry.register_provider("second", load_second_dataset)

    entries = registry.list()
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Callable, Iterable, List, Optional, Protocol, Tuple

from recommendation_pipeline.config.models import FilterDataConfig
from recommendation_pipeline.domain.entities import FilterDataEntry

logger = logging.getLogger(__name__)


class FilterDataRegistryProtocol(Protocol):
    """Read side of a filter data registry."""

    def list(self) -> Tuple[FilterDataEntry, ...]:
        """Return all entries in insertion order."""
        ...


class FilterDataRegistry:
    """
    Thread-safe, append-only registry of filter-parameter datasets.

    Supports:
        - Registration of literal data
        - Registration through a zero-argument provider, called once
        - Bulk registration from configuration
        - Duplicate keys (kept as separate entries)
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._entries: List[FilterDataEntry] = []
        self._lock = RLock()
        logger.debug("FilterDataRegistry initialized")

    def register(self, key: str, data: Any) -> None:
        """
        Append a new ``{key, data}`` entry.

        Always succeeds. A key that is already present is appended again
        rather than replaced.

        Args:
            key: Name of the dataset
            data: Dataset value (opaque to the registry)
        """
        with self._lock:
            if any(entry.key == key for entry in self._entries):
                logger.warning(
                    f"Filter data key '{key}' registered more than once; "
                    f"keeping both entries"
                )
            self._entries.append(FilterDataEntry(key=key, data=data))
            logger.info(f"Registered filter data: {key}")

    def register_provider(self, key: str, provider: Callable[[], Any]) -> None:
        """
        Register the value returned by a zero-argument provider.

        The provider is called exactly once, now. Exceptions raised by the
        provider propagate and nothing is registered.

        Args:
            key: Name of the dataset
            provider: Callable producing the dataset
        """
        data = provider()
        self.register(key, data)

    def register_from_config(self, entries: Iterable[FilterDataConfig]) -> int:
        """
        Register every configured dataset, in configuration order.

        Returns:
            Number of entries registered
        """
        count = 0
        for entry in entries:
            self.register(entry.key, entry.data)
            count += 1
        return count

    def list(self) -> Tuple[FilterDataEntry, ...]:
        """
        Return all entries in insertion order.

        Returns:
            Snapshot tuple; later registrations do not change it
        """
        with self._lock:
            return tuple(self._entries)

    def keys(self) -> List[str]:
        """Keys in insertion order (duplicates included)."""
        with self._lock:
            return [entry.key for entry in self._entries]

    def get(self, key: str) -> Optional[FilterDataEntry]:
        """First entry registered under ``key``, or None."""
        with self._lock:
            for entry in self._entries:
                if entry.key == key:
                    return entry
            return None

    def get_all(self, key: str) -> List[FilterDataEntry]:
        """Every entry registered under ``key``, in insertion order."""
        with self._lock:
            return [entry for entry in self._entries if entry.key == key]

    @property
    def count(self) -> int:
        """Total number of entries."""
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"FilterDataRegistry(entries={self.count}, keys={self.keys()})"
