"""
Cache Configuration Constants

Every resolution result is kept for one fixed window.
"""

from .system import BASE_DAY


class CacheConfig:
    """Resolution cache constants."""

    TTL = BASE_DAY  # 24 hours
    KEY_SEPARATOR = ":"


__all__ = ["CacheConfig"]
