"""
Tests for the ICacheable contract.

Verifies that:
1. Subclasses must implement both value() and refresh()
2. Call sites written against ICacheable work with every shipped strategy
3. Third-party strategies can wrap a Cache with their own policy
"""

import pytest
from icacher import Cache, ICacheable, KeyedCache, TTLCache


def read_twice_then_refresh(source: ICacheable[int]) -> tuple:
    """Call site that only knows the capability contract."""
    return source.value(), source.value(), source.refresh()


class EveryNthRefresh(ICacheable[int]):
    """Custom strategy: serves a cached value, refreshing every n reads."""

    def __init__(self, computation, n: int):
        self._cache = Cache(computation)
        self._n = n
        self._reads = 0

    def value(self) -> int:
        self._reads += 1
        if self._reads % self._n == 0:
            return self._cache.recompute()
        return self._cache.get()

    def refresh(self) -> int:
        return self._cache.recompute()


def make_counter():
    calls = []

    def compute(*_):
        calls.append(1)
        return len(calls)

    return compute


class TestContract:
    """Test the abstract base class."""

    def test_cannot_instantiate_interface(self):
        with pytest.raises(TypeError):
            ICacheable()

    def test_missing_refresh_rejected(self):
        class ValueOnly(ICacheable[int]):
            def value(self) -> int:
                return 1

        with pytest.raises(TypeError):
            ValueOnly()

    @pytest.mark.parametrize(
        "factory",
        [
            lambda: Cache(make_counter()),
            lambda: TTLCache(make_counter(), ttl_seconds=60),
            lambda: KeyedCache(make_counter()).entry("key"),
            lambda: EveryNthRefresh(make_counter(), n=100),
        ],
        ids=["cache", "ttl", "keyed-entry", "custom"],
    )
    def test_strategies_share_call_site(self, factory):
        """Verify every strategy serves the cached value and refreshes on demand."""
        assert read_twice_then_refresh(factory()) == (1, 1, 2)

    def test_custom_strategy_policy(self):
        source = EveryNthRefresh(make_counter(), n=3)
        assert [source.value() for _ in range(6)] == [1, 1, 2, 2, 2, 3]
