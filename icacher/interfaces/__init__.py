"""
Core interface abstractions.

These interfaces define contracts that concrete cache strategies must follow,
so callers depend on the contract rather than the implementation.
"""

from .cacheable import ICacheable

__all__ = [
    "ICacheable",
]
