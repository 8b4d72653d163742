"""
Caching strategies.

All strategies implement the ICacheable interface, making them
interchangeable behind a value()/refresh() call site.
"""

from .cache import Cache
from .keyed_cache import KeyedCache, KeyedEntry
from .ttl_cache import TTLCache

__all__ = [
    "Cache",
    "KeyedCache",
    "KeyedEntry",
    "TTLCache",
]
