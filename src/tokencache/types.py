"""Core types for the tokencache library."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CachedEntry(Generic[T]):
    """A memoized value with its expiry."""

    value: T
    expires_at: int  # Clock timestamp ms


# Duration type alias
Duration = str | int | float  # "30s", "5m", "2h", "1d" or milliseconds

# Producer: zero-argument callable, sync or async
GetValue = Callable[[], T | Awaitable[T]]

# Freshness policy: fixed duration, derived from the fetched value, or none
MaxAge = Duration | Callable[[T], Duration] | None

# (header name, header value)
Header = tuple[str, str]
