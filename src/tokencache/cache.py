"""Expiring single-flight cache for an expensive async producer.

Provides:
- ExpiringCache: callable accessor with time-based expiry and reset()
- build_cache() / token_cache(): factory functions
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from tokencache.sources import max_age_policy, resolve_value
from tokencache.types import CachedEntry, GetValue, MaxAge

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def _consume_exception(task: asyncio.Future[Any]) -> None:
    """Mark a refresh failure as retrieved even if every waiter went away."""
    if not task.cancelled():
        task.exception()


class ExpiringCache(Generic[T]):
    """Memoize the result of ``get_value`` until it expires.

    Concurrent callers that find the entry missing or expired share one
    in-flight refresh and all observe its outcome: the same value, or the
    same exception object. Failures leave the entry untouched.

    Usage:
        cache = ExpiringCache(fetch_token, max_age="5m")
        token = await cache()
        cache.reset()  # Force a fetch on the next call

    ``max_age`` is a duration ("30s" or milliseconds), a callable deriving
    the duration from each fetched value, or None (always expired, so only
    concurrent calls are deduplicated).
    """

    def __init__(
        self,
        get_value: GetValue[T],
        *,
        max_age: MaxAge[T] = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        if not callable(get_value):
            raise TypeError(
                f"get_value must be callable, got {type(get_value).__name__}"
            )
        self._get_value = get_value
        self._max_age = max_age_policy(max_age)
        self._clock = clock or _monotonic_ms
        self._entry: CachedEntry[T] | None = None
        self._lock = asyncio.Lock()
        self._in_flight: asyncio.Task[T] | None = None

    @property
    def entry(self) -> CachedEntry[T] | None:
        """The last successfully fetched entry, expired or not."""
        return self._entry

    def _is_alive(self, entry: CachedEntry[T]) -> bool:
        """Check if entry expires strictly after now."""
        return entry.expires_at - self._clock() > 0

    async def __call__(self) -> T:
        entry = self._entry
        if entry is not None and self._is_alive(entry):
            return entry.value

        async with self._lock:
            # Another caller may have refreshed while we waited for the lock
            entry = self._entry
            if entry is not None and self._is_alive(entry):
                return entry.value

            task = self._in_flight
            if task is None:
                logger.debug("Refreshing cached value")
                task = asyncio.ensure_future(self._refresh())
                task.add_done_callback(_consume_exception)
                self._in_flight = task
            else:
                logger.debug("Joining in-flight refresh")

        # Shielded so a cancelled waiter cannot abort the shared refresh
        return await asyncio.shield(task)

    def reset(self) -> None:
        """Forget the cached value. An in-flight refresh still completes."""
        self._entry = None
        logger.debug("Cache reset")

    async def _refresh(self) -> T:
        try:
            value: T = await resolve_value(self._get_value)
            max_age = self._max_age(value)
        except Exception as e:
            logger.debug("Refresh failed: %s", type(e).__name__)
            raise
        finally:
            self._in_flight = None

        self._entry = CachedEntry(value=value, expires_at=self._clock() + max_age)
        logger.debug("Refreshed cached value (max_age=%dms)", max_age)
        return value


def build_cache(
    get_value: GetValue[T],
    *,
    max_age: MaxAge[T] = None,
) -> ExpiringCache[T]:
    """Create an expiring single-flight cache around ``get_value``.

    Args:
        get_value: Zero-argument producer, sync or async
        max_age: Fixed duration, ``value -> duration`` callable, or None

    Returns:
        An awaitable accessor with a ``reset()`` method
    """
    return ExpiringCache(get_value, max_age=max_age)


token_cache = build_cache


__all__ = ["ExpiringCache", "build_cache", "token_cache"]
