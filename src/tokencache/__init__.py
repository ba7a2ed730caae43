"""tokencache - Expiring single-flight cache for async producers."""

from contextlib import suppress

# Cache API
from tokencache.cache import ExpiringCache, build_cache, token_cache

# Duration parsing
from tokencache.duration import parse_duration

# Request decoration
from tokencache.interceptor import bearer_header, token_interceptor
from tokencache.sources import resolve_value

# Core types
from tokencache.types import CachedEntry, Duration, GetValue, Header, MaxAge

# Optional httpx integration - only available when httpx is installed
with suppress(ImportError):
    from tokencache.httpx_auth import TokenAuth

__version__ = "0.1.0"

__all__ = [
    "CachedEntry",
    "Duration",
    "ExpiringCache",
    "GetValue",
    "Header",
    "MaxAge",
    "TokenAuth",
    "bearer_header",
    "build_cache",
    "parse_duration",
    "resolve_value",
    "token_cache",
    "token_interceptor",
]
