"""RadixVault services.

Network-facing components: fetcher, throttle, cache, probe, scale
assembler and the resolver composing them.
"""

from .context import ResolverContext
from .http_fetcher import HostKind, RetryingFetcher
from .path_probe import PathProbe
from .request_throttle import RequestThrottle
from .resolver import Resolver
from .scale_assembler import ScaleAssembler
from .ttl_cache import TTLCache

__all__ = [
    "HostKind",
    "PathProbe",
    "RequestThrottle",
    "Resolver",
    "ResolverContext",
    "RetryingFetcher",
    "ScaleAssembler",
    "TTLCache",
]
