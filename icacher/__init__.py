"""
icacher - memoization helpers.

Runs an expensive, deterministic computation at most once and serves later
requests from the stored value, unless explicitly asked to recompute.
"""

from .caching import Cache, KeyedCache, KeyedEntry, TTLCache
from .config import Settings, settings
from .interfaces import ICacheable
from .models import CacheEntry, CacheStats

__version__ = "0.2.0"

__all__ = [
    "Cache",
    "KeyedCache",
    "KeyedEntry",
    "TTLCache",
    "ICacheable",
    "CacheEntry",
    "CacheStats",
    "Settings",
    "settings",
]
