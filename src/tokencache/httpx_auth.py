"""httpx integration: attach a token header to every outgoing request."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any

import httpx

from tokencache.interceptor import bearer_header
from tokencache.sources import resolve_value
from tokencache.types import Header


class TokenAuth(httpx.Auth):
    """Async httpx auth that resolves a token source per request.

    Usage:
        auth = TokenAuth(token_cache(fetch_token, max_age="5m"))
        async with httpx.AsyncClient(auth=auth) as client:
            await client.get("https://api.example.com/items")
    """

    def __init__(
        self,
        token: Any,
        *,
        header: Callable[[Any], Header] | None = None,
    ) -> None:
        self._token = token
        self._header = header or bearer_header

    def sync_auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        raise RuntimeError("TokenAuth requires httpx.AsyncClient")

    async def async_auth_flow(
        self, request: httpx.Request
    ) -> AsyncGenerator[httpx.Request, httpx.Response]:
        value = await resolve_value(self._token)
        name, header_value = self._header(value)
        request.headers[name] = header_value
        yield request


__all__ = ["TokenAuth"]
