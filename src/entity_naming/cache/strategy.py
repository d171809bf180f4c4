"""Cache eviction strategy selector.

A small enumerated value that cache implementations and configuration code
use to pick a broad eviction policy. Capacity and TTL durations are configured
separately.

Examples:
    >>> CacheStrategy.parse("  lru ")
    <CacheStrategy.LRU: 'LRU'>
    >>> str(CacheStrategy.NONE)
    'None'
"""

from enum import Enum


class CacheStrategy(str, Enum):
    """Eviction and expiration policy of a cache.

    The string values are stable identifiers for logs, metric labels and
    settings files.
    """

    LRU = "LRU"  # least recently used
    LFU = "LFU"  # least frequently used
    TTL = "TTL"  # time-to-live expiry
    NONE = "None"  # caching disabled

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "CacheStrategy":
        """Parse a strategy name, ignoring case and surrounding whitespace.

        :raises ValueError: If ``text`` is empty or not a known strategy
        """
        token = text.strip().lower()
        if not token:
            raise ValueError("empty cache strategy")
        for member in cls:
            if member.value.lower() == token:
                return member
        raise ValueError(f"unknown cache strategy: {text!r}")
