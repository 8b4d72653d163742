"""
Keyed function cache.

Caches one result per distinct argument of a one-argument function.
Functions of several parameters take them enclosed in a tuple.
Uses OrderedDict for O(1) access and least-recently-used eviction when
bounded.
"""

import logging
from typing import Callable, Generic, Hashable, Optional, TypeVar, OrderedDict as OrderedDictType
from collections import OrderedDict
from ..config import settings
from ..interfaces.cacheable import ICacheable
from ..models import CacheEntry, CacheStats

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class KeyedCache(Generic[K, V]):
    """
    Function cacher storing each return value under its argument.

    Features:
    - O(1) get/recompute operations
    - Optional size bound with LRU eviction
    - Conditional caching via cache_if()
    - Per-argument ICacheable views via entry()
    """

    def __init__(self, func: Callable[[K], V], max_size: Optional[int] = None):
        """
        Initialize keyed cache.

        Args:
            func: One-argument function to cache; use a tuple for several arguments
            max_size: Maximum number of stored results (default: settings.keyed_max_size,
                None = unbounded)
        """
        if max_size is None:
            max_size = settings.keyed_max_size
        if max_size is not None and max_size < 1:
            raise ValueError(f"Invalid max_size: {max_size}. Must be at least 1.")

        self._func = func
        self._max_size = max_size
        self._values: OrderedDictType[K, CacheEntry] = OrderedDict()

        self._stats = CacheStats()

    def get(self, arg: K) -> V:
        """
        Return the cached result for arg, computing and storing it on a miss.

        Args:
            arg: Function argument

        Returns:
            The result of func(arg)
        """
        if arg in self._values:
            self._values.move_to_end(arg)
            entry = self._values[arg]
            self._stats.hits += 1
            return entry.value

        value = self._store(arg)
        self._stats.misses += 1
        return value

    with_arg = get

    def recompute(self, arg: K) -> V:
        """
        Run func(arg) unconditionally and overwrite its stored result.

        Args:
            arg: Function argument

        Returns:
            The new result
        """
        value = self._store(arg)
        self._stats.refreshes += 1
        return value

    def is_cached(self, arg: K) -> bool:
        """Check if a result for arg is stored, without updating access."""
        return arg in self._values

    def remove(self, arg: K) -> Optional[V]:
        """
        Remove the stored result for arg.

        Args:
            arg: Function argument

        Returns:
            The removed result, or None if nothing was stored
        """
        entry = self._values.pop(arg, None)
        if entry is None:
            return None

        self._stats.evictions += 1
        logger.debug(f"Removed cached result for argument {arg!r}")
        return entry.value

    def reset(self) -> None:
        """Clear all stored results; each one counts as an eviction."""
        if not self._values:
            return

        count = len(self._values)
        self._values.clear()
        self._stats.evictions += count
        logger.debug(f"Cleared {count} cached results")

    def replace(self, func: Callable[[K], V], keep_values: bool = False) -> None:
        """
        Swap the cached function.

        Args:
            func: New one-argument function
            keep_values: Keep results computed by the old function instead of clearing them
        """
        self._func = func
        if not keep_values:
            self.reset()

    def void(self, arg: K) -> None:
        """Same as get() but discards the result."""
        self.get(arg)

    def cache_if(self, condition: Callable[[], bool], arg: K) -> bool:
        """
        Cache the result for arg only if condition() is true.

        The condition is not evaluated when arg is already cached.

        Args:
            condition: Zero-argument predicate
            arg: Function argument

        Returns:
            True if a new result was cached, False otherwise
        """
        if self.is_cached(arg) or not condition():
            return False

        self.void(arg)
        return True

    def entry(self, arg: K) -> "KeyedEntry[K, V]":
        """
        Get an ICacheable view bound to a single argument.

        Args:
            arg: Function argument

        Returns:
            KeyedEntry whose value()/refresh() go through this cache
        """
        return KeyedEntry(self, arg)

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, refreshes, evictions and size
        """
        self._stats.size = len(self._values)
        return self._stats

    def get_max_size(self) -> Optional[int]:
        """Get maximum number of stored results (None = unbounded)."""
        return self._max_size

    def _store(self, arg: K) -> V:
        """Compute func(arg) and store it; nothing is stored if func raises."""
        try:
            value = self._func(arg)
        except Exception:
            logger.debug(f"Computation failed for argument {arg!r}; nothing stored")
            raise

        if arg in self._values:
            self._values.move_to_end(arg)
        elif self._max_size is not None and len(self._values) >= self._max_size:
            self._evict_lru()

        self._values[arg] = CacheEntry(value=value)
        logger.debug(f"Cached result for argument {arg!r}")
        return value

    def _evict_lru(self) -> None:
        """Evict the least recently used result (first item in OrderedDict)."""
        if self._values:
            arg, _ = self._values.popitem(last=False)
            self._stats.evictions += 1
            logger.debug(f"Evicted least recently used argument {arg!r}")

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, arg: object) -> bool:
        return arg in self._values


class KeyedEntry(ICacheable[V], Generic[K, V]):
    """ICacheable view of one argument's slot in a KeyedCache."""

    def __init__(self, cache: KeyedCache[K, V], arg: K):
        self.cache = cache
        self.arg = arg

    def value(self) -> V:
        return self.cache.get(self.arg)

    def refresh(self) -> V:
        return self.cache.recompute(self.arg)

    def is_cached(self) -> bool:
        return self.cache.is_cached(self.arg)
