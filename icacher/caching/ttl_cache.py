"""
TTL cache - single value that expires after a time to live.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional, TypeVar
from ..config import settings
from ..interfaces.cacheable import ICacheable
from ..models import CacheEntry, CacheStats

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TTLCache(ICacheable[T]):
    """
    Single-value cache whose stored value goes stale after ttl_seconds.

    value() recomputes once the stored value has expired; refresh()
    always recomputes and restarts the TTL.
    """

    def __init__(
        self,
        computation: Callable[[], T],
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        """
        Initialize TTL cache.

        Args:
            computation: Zero-argument function producing the value
            ttl_seconds: Time to live in seconds (default: settings.default_ttl_seconds)
            clock: Source of the current time
        """
        if ttl_seconds is None:
            ttl_seconds = settings.default_ttl_seconds
        if ttl_seconds <= 0:
            raise ValueError(f"Invalid ttl_seconds: {ttl_seconds}. Must be positive.")

        self._computation = computation
        self._ttl = ttl_seconds
        self._clock = clock
        self._entry: Optional[CacheEntry] = None

        self._stats = CacheStats()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def value(self) -> T:
        """
        Return the stored value, recomputing it if missing or expired.

        Returns:
            The cached or freshly computed value
        """
        now = self._clock()

        if self._entry is not None:
            if not self._entry.is_expired(now):
                self._stats.hits += 1
                return self._entry.value

            logger.debug(f"Cached value expired after {self._ttl}s")
            entry = self._compute(now)
            self._stats.evictions += 1
        else:
            entry = self._compute(now)

        self._entry = entry
        self._stats.misses += 1
        return entry.value

    def refresh(self) -> T:
        """
        Recompute unconditionally and restart the TTL.

        Returns:
            The new value
        """
        self._entry = self._compute(self._clock())
        self._stats.refreshes += 1
        return self._entry.value

    def is_cached(self) -> bool:
        """Check if an unexpired value is stored."""
        return self._entry is not None and not self._entry.is_expired(self._clock())

    def expires_at(self) -> Optional[datetime]:
        """Get the expiry time of the stored value, or None if empty."""
        if self._entry is None:
            return None
        return self._entry.cached_at + timedelta(seconds=self._ttl)

    def invalidate(self) -> Optional[T]:
        """
        Drop the stored value, expired or not.

        Returns:
            The value that was stored, or None if the cache was empty
        """
        if self._entry is None:
            return None

        entry, self._entry = self._entry, None
        self._stats.evictions += 1
        logger.debug("Invalidated cached value")
        return entry.value

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats; expired values count as evictions
        """
        self._stats.size = 1 if self.is_cached() else 0
        return self._stats

    def _compute(self, now: datetime) -> CacheEntry:
        # A failed computation leaves the previous entry in place
        value = self._computation()
        logger.debug(f"Computed value, valid for {self._ttl}s")
        return CacheEntry(value=value, cached_at=now, ttl=self._ttl)
