"""
Single-value cache.

Lazily computes one value from a zero-argument computation and keeps it
until explicitly recomputed or invalidated.
"""

import logging
from typing import Callable, Optional, TypeVar
from ..interfaces.cacheable import ICacheable
from ..models import CacheEntry, CacheStats

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Cache(ICacheable[T]):
    """
    Memoizing holder for the result of a zero-argument computation.

    The computation runs on the first get() and again only on recompute().
    If the computation raises, the exception propagates and the stored
    value is left exactly as it was before the call.

    Not safe for concurrent mutation; wrap it with a lock if shared
    between threads.
    """

    def __init__(self, computation: Callable[[], T]):
        """
        Initialize an empty cache.

        Args:
            computation: Zero-argument function producing the value
        """
        self._computation = computation

        # None means Empty; the entry wraps the value so None is cacheable
        self._entry: Optional[CacheEntry] = None

        self._stats = CacheStats()

    def get(self) -> T:
        """
        Return the cached value, computing it on first use.

        Returns:
            The stored value
        """
        if self._entry is not None:
            self._stats.hits += 1
            return self._entry.value

        self._entry = self._compute()
        self._stats.misses += 1
        return self._entry.value

    def recompute(self) -> T:
        """
        Run the computation unconditionally and overwrite the stored value.

        Returns:
            The new value
        """
        self._entry = self._compute()
        self._stats.refreshes += 1
        return self._entry.value

    def is_cached(self) -> bool:
        """Check if a value is currently stored."""
        return self._entry is not None

    def invalidate(self) -> Optional[T]:
        """
        Drop the stored value so the next get() recomputes.

        Returns:
            The value that was stored, or None if the cache was empty
        """
        if self._entry is None:
            return None

        entry, self._entry = self._entry, None
        self._stats.evictions += 1
        logger.debug(f"Invalidated cached value of {self._name()}")
        return entry.value

    def replace(self, computation: Callable[[], T], keep_value: bool = False) -> None:
        """
        Swap the computation.

        Args:
            computation: New zero-argument function
            keep_value: Keep the currently stored value instead of clearing it
        """
        self._computation = computation
        if not keep_value:
            self.invalidate()

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats with hits, misses, refreshes, evictions and size
        """
        self._stats.size = 1 if self._entry is not None else 0
        return self._stats

    # ICacheable
    def value(self) -> T:
        return self.get()

    def refresh(self) -> T:
        return self.recompute()

    def _compute(self) -> CacheEntry:
        """Invoke the computation and wrap the result, leaving state untouched on failure."""
        try:
            result = self._computation()
        except Exception:
            logger.debug(f"Computation {self._name()} failed; stored value left unchanged")
            raise

        logger.debug(f"Computed value of {self._name()}")
        return CacheEntry(value=result)

    def _name(self) -> str:
        return getattr(self._computation, "__qualname__", repr(self._computation))

    def __repr__(self) -> str:
        state = "populated" if self._entry is not None else "empty"
        return f"Cache({self._name()}, {state})"
