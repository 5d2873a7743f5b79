"""
Main Smartsheet request client.

Owns the client configuration, the default httpx transport and the request
pipeline. Endpoint catalogs call `make_request()` with their specs.
"""

from __future__ import annotations

from typing import Any

import httpx

from .api.request import Request
from .api.request_client import AsyncRequestClient, RequestClient
from .api.request_logger import LoggingRequestLogger, RequestLogger
from .api.specs import EndpointSpec, RequestSpec
from .api.transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport
from .config import ClientConfig
from .constants import API_URL


def _select_logger(logger: RequestLogger | None, log_requests: bool) -> RequestLogger | None:
    if logger is not None:
        return logger
    return LoggingRequestLogger() if log_requests else None


class Smartsheet:
    """
    Synchronous Smartsheet client.

    Example:
        ```python
        from smartsheet_requests import EndpointSpec, Placeholder, RequestSpec, Smartsheet

        get_sheet = EndpointSpec("GET", ["sheets", Placeholder("sheet_id")])

        with Smartsheet(token="your-token") as client:
            response = client.make_request(
                get_sheet,
                RequestSpec(path_values={"sheet_id": 42}, params={"include": "discussions"}),
            )
            print(response.json())
        ```
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = API_URL,
        app_user_agent: str | None = None,
        assume_user: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | Transport | None = None,
        logger: RequestLogger | None = None,
        log_requests: bool = False,
    ):
        """
        Initialize the client.

        Args:
            token: API access token
            base_url: API base URL (default: https://api.smartsheet.com/2.0)
            app_user_agent: Suffix identifying your application in User-Agent
            assume_user: Email of a user to impersonate (requires admin token)
            timeout: Request timeout in seconds for the default transport
            transport: Either an httpx transport for the default httpx client
                (e.g. `httpx.MockTransport`), or a complete request transport
            logger: Request logger; overrides `log_requests`
            log_requests: Log every request at DEBUG level (token redacted)
        """
        config = ClientConfig(
            token=token,
            base_url=base_url,
            app_user_agent=app_user_agent,
            assume_user=assume_user,
        )
        self._init(
            config,
            timeout=timeout,
            transport=transport,
            logger=logger,
            log_requests=log_requests,
        )

    def _init(
        self,
        config: ClientConfig,
        *,
        timeout: float,
        transport: httpx.BaseTransport | Transport | None,
        logger: RequestLogger | None,
        log_requests: bool,
    ) -> None:
        self._config = config
        self._http: HttpxTransport | None = None
        if transport is None or isinstance(transport, httpx.BaseTransport):
            self._http = HttpxTransport(timeout=timeout, transport=transport)
            request_transport: Transport = self._http
        else:
            request_transport = transport
        self._requests = RequestClient(
            config, request_transport, logger=_select_logger(logger, log_requests)
        )

    @classmethod
    def from_config(cls, config: ClientConfig, **kwargs: Any) -> Smartsheet:
        """Create a client from an existing `ClientConfig`."""
        client = cls.__new__(cls)
        client._init(
            config,
            timeout=kwargs.get("timeout", 30.0),
            transport=kwargs.get("transport"),
            logger=kwargs.get("logger"),
            log_requests=kwargs.get("log_requests", False),
        )
        return client

    @classmethod
    def from_env(cls, *, dotenv: bool = False, **kwargs: Any) -> Smartsheet:
        """Create a client from `SMARTSHEET_*` environment variables."""
        return cls.from_config(ClientConfig.from_env(dotenv=dotenv), **kwargs)

    def __enter__(self) -> Smartsheet:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the default HTTP transport, if this client created one."""
        if self._http is not None:
            self._http.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def make_request(
        self, endpoint_spec: EndpointSpec, request_spec: RequestSpec | None = None
    ) -> Any:
        return self._requests.make_request(endpoint_spec, request_spec)

    def build_request(
        self, endpoint_spec: EndpointSpec, request_spec: RequestSpec | None = None
    ) -> Request:
        """
        Compose a request without sending it (useful for debugging).

        Call `release()` on the result to close a file opened for a `PathFileSpec`.
        """
        return self._requests.build_request(endpoint_spec, request_spec)


class AsyncSmartsheet:
    """
    Asynchronous Smartsheet client.

    Same interface as `Smartsheet` with an awaitable `make_request()`.

    Example:
        ```python
        async with AsyncSmartsheet(token="your-token") as client:
            spec = RequestSpec(path_values={"sheet_id": 42})
            response = await client.make_request(get_sheet, spec)
        ```
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = API_URL,
        app_user_agent: str | None = None,
        assume_user: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | AsyncTransport | None = None,
        logger: RequestLogger | None = None,
        log_requests: bool = False,
    ):
        self._config = ClientConfig(
            token=token,
            base_url=base_url,
            app_user_agent=app_user_agent,
            assume_user=assume_user,
        )
        self._http: AsyncHttpxTransport | None = None
        if transport is None or isinstance(transport, httpx.AsyncBaseTransport):
            self._http = AsyncHttpxTransport(timeout=timeout, transport=transport)
            request_transport: AsyncTransport = self._http
        else:
            request_transport = transport
        self._requests = AsyncRequestClient(
            self._config, request_transport, logger=_select_logger(logger, log_requests)
        )

    async def __aenter__(self) -> AsyncSmartsheet:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._http is not None:
            await self._http.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def make_request(
        self, endpoint_spec: EndpointSpec, request_spec: RequestSpec | None = None
    ) -> Any:
        return await self._requests.make_request(endpoint_spec, request_spec)

    def build_request(
        self, endpoint_spec: EndpointSpec, request_spec: RequestSpec | None = None
    ) -> Request:
        """See `Smartsheet.build_request`."""
        return self._requests.build_request(endpoint_spec, request_spec)
