"""
Cacheable interface - unified contract for all caching strategies.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class ICacheable(ABC, Generic[T]):
    """
    Unified cacheable interface following Strategy Pattern.

    Single-slot caches, TTL caches and per-key views of keyed caches all
    implement this interface, so call sites that only need "give me the
    value, refresh on demand" stay agnostic of the strategy behind it.
    """

    @abstractmethod
    def value(self) -> T:
        """
        Retrieve the current value, computing it if the strategy
        considers the stored value missing or stale.

        Returns:
            The cached or freshly computed value
        """
        pass

    @abstractmethod
    def refresh(self) -> T:
        """
        Force recomputation, bypassing any validity check.

        Returns:
            The newly computed value
        """
        pass
