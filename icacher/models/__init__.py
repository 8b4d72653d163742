from .entry import CacheEntry
from .stats import CacheStats

__all__ = [
    "CacheEntry",
    "CacheStats",
]
