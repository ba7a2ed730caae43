"""Value sources: constants or zero-argument producers, sync or async.

Both the cache's producer and the interceptor's token go through
``resolve_value`` so a static token, a plain function, a coroutine
function and an ``ExpiringCache`` are all interchangeable.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TypeVar, cast

from tokencache.duration import parse_duration
from tokencache.types import MaxAge

T = TypeVar("T")


async def resolve_value(source: Any) -> Any:
    """Resolve a value source to a concrete value.

    Callables are invoked with no arguments and their result awaited when it
    is awaitable. Anything else is returned unchanged.
    """
    if not callable(source):
        return source
    result = source()
    if inspect.isawaitable(result):
        return await result
    return result


def max_age_policy(max_age: MaxAge[T]) -> Callable[[T], int]:
    """Normalize a max_age option into ``value -> milliseconds``.

    Fixed durations are parsed once, so a malformed one fails here rather
    than on the first fetch.
    """
    if max_age is None:
        return lambda _value: 0
    if callable(max_age):
        derive = cast(Callable[[T], Any], max_age)
        return lambda value: parse_duration(derive(value))
    fixed = parse_duration(max_age)
    return lambda _value: fixed


__all__ = ["max_age_policy", "resolve_value"]
