"""
Unit Tests for FilterDataRegistry.

Tests:
    - Registration order is preserved
    - Duplicate keys are kept, never overwritten
    - Provider-based and config-based registration
    - Thread-safety
"""

from __future__ import annotations

import threading
from typing import List

import pytest

from recommendation_pipeline.config.models import FilterDataConfig
from recommendation_pipeline.domain.entities import FilterDataEntry
from recommendation_pipeline.registry.filter_data_registry import FilterDataRegistry


class TestFilterDataRegistryRegistration:
    """Tests for registration and listing."""

    def test_list_preserves_registration_order(self) -> None:
        """
        SCENARIO: Register "first" then "second"
        EXPECTED: Both listed in that order with their original data
        """
        registry = FilterDataRegistry()
        registry.register("first", ["1data1", "2data1", "3data1"])
        registry.register("second", ["1data2", "2data2", "3data2"])

        entries = registry.list()

        assert [e.key for e in entries] == ["first", "second"]
        assert entries[0].data == ["1data1", "2data1", "3data1"]
        assert entries[1].data == ["1data2", "2data2", "3data2"]

    def test_empty_registry_lists_nothing(self) -> None:
        registry = FilterDataRegistry()

        assert registry.list() == ()
        assert len(registry) == 0

    def test_duplicate_keys_are_appended(self) -> None:
        """
        SCENARIO: Same key registered twice
        EXPECTED: Two entries, first one untouched
        """
        registry = FilterDataRegistry()
        registry.register("first", "a")
        registry.register("first", "b")

        assert registry.count == 2
        assert registry.keys() == ["first", "first"]
        assert registry.get("first").data == "a"
        assert [e.data for e in registry.get_all("first")] == ["a", "b"]

    def test_get_unknown_key_returns_none(self) -> None:
        registry = FilterDataRegistry()
        registry.register("first", 1)

        assert registry.get("missing") is None
        assert registry.get_all("missing") == []

    def test_list_is_snapshot(self) -> None:
        """Later registrations do not change an earlier listing."""
        registry = FilterDataRegistry()
        registry.register("first", 1)
        snapshot = registry.list()

        registry.register("second", 2)

        assert len(snapshot) == 1
        assert len(registry.list()) == 2

    def test_entries_are_immutable(self) -> None:
        registry = FilterDataRegistry()
        registry.register("first", 1)

        entry = registry.list()[0]

        with pytest.raises(Exception):
            entry.key = "changed"

    def test_entry_mapping_view(self) -> None:
        entry = FilterDataEntry(key="first", data=[1, 2])

        assert entry.as_mapping() == {"first": [1, 2]}


class TestFilterDataRegistryProviders:
    """Tests for provider and config registration."""

    def test_provider_called_once_at_registration(self) -> None:
        calls: List[int] = []

        def provider() -> List[str]:
            calls.append(1)
            return ["x"]

        registry = FilterDataRegistry()
        registry.register_provider("first", provider)
        registry.list()
        registry.list()

        assert len(calls) == 1
        assert registry.get("first").data == ["x"]

    def test_failing_provider_registers_nothing(self) -> None:
        def provider() -> List[str]:
            raise RuntimeError("source down")

        registry = FilterDataRegistry()

        with pytest.raises(RuntimeError, match="source down"):
            registry.register_provider("first", provider)
        assert registry.count == 0

    def test_register_from_config(self) -> None:
        registry = FilterDataRegistry()
        entries = [
            FilterDataConfig(key="first", data=[1]),
            FilterDataConfig(key="second", data={"threshold": 3}),
        ]

        count = registry.register_from_config(entries)

        assert count == 2
        assert registry.keys() == ["first", "second"]
        assert registry.get("second").data == {"threshold": 3}


class TestFilterDataRegistryThreadSafety:
    """Tests for thread-safety."""

    def test_concurrent_registration(self) -> None:
        registry = FilterDataRegistry()
        num_threads = 10
        entries_per_thread = 50
        errors: List[Exception] = []

        def register_entries(thread_id: int) -> None:
            try:
                for i in range(entries_per_thread):
                    registry.register(f"data_{thread_id}_{i}", i)
            except Exception as e:
                errors.append(e)

        threads = [
            threading.Thread(target=register_entries, args=(i,))
            for i in range(num_threads)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(errors) == 0
        assert registry.count == num_threads * entries_per_thread
