"""
Composition root for requests.

Combines an `EndpointSpec` and a `RequestSpec` into a single `Request`, logs it,
and submits it to the transport. No endpoint-specific logic lives here.
"""

from __future__ import annotations

from typing import Any

from ..config import ClientConfig
from .headers import HeaderBuilder
from .request import Request
from .request_builder import RequestBuilder
from .request_logger import MuteRequestLogger, RequestLogger
from .specs import EndpointSpec, RequestSpec
from .transport import AsyncTransport, Transport
from .urls import UrlBuilder

_EMPTY_REQUEST_SPEC = RequestSpec()


class _BaseRequestClient:
    def __init__(self, config: ClientConfig, *, logger: RequestLogger | None = None):
        self._config = config
        self._logger: RequestLogger = logger or MuteRequestLogger()
        self._builder = RequestBuilder(UrlBuilder(config.base_url), HeaderBuilder(config))

    @property
    def config(self) -> ClientConfig:
        return self._config

    def build_request(
        self,
        endpoint_spec: EndpointSpec,
        request_spec: RequestSpec | None = None,
    ) -> Request:
        """
        Build (but do not send) the request for a call.

        For a `PathFileSpec` the returned request holds an open file; call
        `request.release()` once done with it. `make_request` does this itself.
        """
        return self._builder.apply(
            self._config.token,
            endpoint_spec,
            request_spec or _EMPTY_REQUEST_SPEC,
            Request(),
        )


class RequestClient(_BaseRequestClient):
    """Builds, logs and dispatches requests through a synchronous transport."""

    def __init__(
        self,
        config: ClientConfig,
        transport: Transport,
        *,
        logger: RequestLogger | None = None,
    ):
        super().__init__(config, logger=logger)
        self._transport = transport

    def make_request(
        self,
        endpoint_spec: EndpointSpec,
        request_spec: RequestSpec | None = None,
    ) -> Any:
        """
        Build the request for a call and execute it.

        Returns:
            Whatever the transport returned, unmodified.

        Raises:
            MissingPathValueError: A path placeholder has no value.
            FileSpecError: A path-backed file could not be accessed.
        """
        request = self.build_request(endpoint_spec, request_spec)
        try:
            self._logger.log_request(request)
            return self._transport.execute(request)
        finally:
            request.release()


class AsyncRequestClient(_BaseRequestClient):
    """`RequestClient` counterpart for awaitable transports."""

    def __init__(
        self,
        config: ClientConfig,
        transport: AsyncTransport,
        *,
        logger: RequestLogger | None = None,
    ):
        super().__init__(config, logger=logger)
        self._transport = transport

    async def make_request(
        self,
        endpoint_spec: EndpointSpec,
        request_spec: RequestSpec | None = None,
    ) -> Any:
        request = self.build_request(endpoint_spec, request_spec)
        try:
            self._logger.log_request(request)
            return await self._transport.execute(request)
        finally:
            request.release()
