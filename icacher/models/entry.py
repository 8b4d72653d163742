"""
Cache entry model - the stored value slot shared by all cache strategies.
"""

from typing import Any, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class CacheEntry(BaseModel):
    """Single cached value with metadata"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: Any
    cached_at: datetime = Field(default_factory=datetime.now)
    ttl: Optional[float] = None  # seconds

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if entry has expired based on TTL."""
        if self.ttl is None:
            return False
        now = now or datetime.now()
        return (now - self.cached_at).total_seconds() >= self.ttl
