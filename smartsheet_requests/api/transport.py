"""
Transport collaborators.

A transport executes a built `Request` and returns the raw response unmodified.
The httpx adapters here are the default; any object with a matching `execute`
works. Retries, TLS and connection handling all live at this level.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterator, Mapping
from typing import Any, Protocol

import httpx
from pydantic import BaseModel

from .request import Request
from .specs import BodyType

_CHUNK_SIZE = 64 * 1024


class Transport(Protocol):
    def execute(self, request: Request) -> Any: ...


class AsyncTransport(Protocol):
    async def execute(self, request: Request) -> Any: ...


def _json_payload(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, Mapping):
        return {key: _json_payload(value) for key, value in body.items()}
    if isinstance(body, (list, tuple)):
        return [_json_payload(item) for item in body]
    return body


def _iter_chunks(stream: Any) -> Iterator[bytes]:
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            return
        yield chunk


async def _aiter_chunks(stream: Any) -> AsyncIterator[bytes]:
    # keep blocking reads off the event loop
    while True:
        chunk = await asyncio.to_thread(stream.read, _CHUNK_SIZE)
        if not chunk:
            return
        yield chunk


def _body_kwargs(request: Request, *, is_async: bool) -> dict[str, Any]:
    if request.body is None:
        return {}
    if request.body_type is BodyType.JSON:
        return {"json": _json_payload(request.body)}
    body = request.body
    if isinstance(body, (bytes, bytearray)):
        return {"content": bytes(body)}
    return {"content": _aiter_chunks(body) if is_async else _iter_chunks(body)}


class HttpxTransport:
    """
    Executes requests with an `httpx.Client`.

    Args:
        client: Existing client to use (not closed by this transport).
        timeout: Request timeout in seconds, for the internally created client.
        transport: Optional httpx transport for the internal client
            (e.g. `httpx.MockTransport` in tests).
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, transport=transport)

    def execute(self, request: Request) -> httpx.Response:
        return self._client.request(
            request.method.value,
            request.url,
            params=request.params or None,
            headers=request.headers,
            **_body_kwargs(request, is_async=False),
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class AsyncHttpxTransport:
    """
    `HttpxTransport` counterpart built on `httpx.AsyncClient`.

    File bodies are read chunk by chunk with `asyncio.to_thread`, so this
    transport runs under an asyncio event loop.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, transport=transport)

    async def execute(self, request: Request) -> httpx.Response:
        return await self._client.request(
            request.method.value,
            request.url,
            params=request.params or None,
            headers=request.headers,
            **_body_kwargs(request, is_async=True),
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
