"""Request decoration with a token-derived header."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from tokencache.sources import resolve_value
from tokencache.types import Header


def bearer_header(token: Any) -> Header:
    """Default header: ``Authorization: Bearer <token>``."""
    return ("Authorization", f"Bearer {token}")


def token_interceptor(
    *,
    token: Any,
    header: Callable[[Any], Header] | None = None,
) -> Callable[[Mapping[str, Any]], Awaitable[dict[str, Any]]]:
    """Build an async request interceptor that adds a token header.

    ``token`` may be a static value, a sync or async zero-argument function,
    or an ``ExpiringCache``. It is resolved on every request.

    Usage:
        intercept = token_interceptor(token=token_cache(fetch_token, max_age="5m"))
        request = await intercept({"headers": {"Accept": "application/json"}})
    """
    make_header = header or bearer_header

    async def intercept(request: Mapping[str, Any]) -> dict[str, Any]:
        value = await resolve_value(token)
        name, header_value = make_header(value)
        return {
            **request,
            "headers": {**(request.get("headers") or {}), name: header_value},
        }

    return intercept


__all__ = ["bearer_header", "token_interceptor"]
