"""
Compiles an (endpoint spec, request spec) pair into a `Request`.

The order is fixed: URL, method, headers, params, body. Headers must be composed
before the body is assigned; file content headers are read from the file spec.
"""

from __future__ import annotations

from collections.abc import Callable

from .headers import HeaderBuilder
from .request import Request
from .specs import BodyType, EndpointSpec, RequestSpec
from .urls import UrlBuilder

BodyAssigner = Callable[[EndpointSpec, RequestSpec, Request], None]


def _no_body(endpoint_spec: EndpointSpec, request_spec: RequestSpec, req: Request) -> None:
    # Any body supplied for a body-less endpoint is ignored, not rejected.
    req.body = None


def _json_body(endpoint_spec: EndpointSpec, request_spec: RequestSpec, req: Request) -> None:
    if request_spec.body is not None:
        req.body = request_spec.body


def _file_body(endpoint_spec: EndpointSpec, request_spec: RequestSpec, req: Request) -> None:
    file_spec = request_spec.file_spec
    if file_spec is None:
        raise ValueError(
            f"{endpoint_spec.method.value} {endpoint_spec.template} requires a file_spec"
        )
    req.body = file_spec.open_stream()
    req.close_body = file_spec.owns_stream


_BODY_ASSIGNERS: dict[BodyType, BodyAssigner] = {
    BodyType.NONE: _no_body,
    BodyType.JSON: _json_body,
    BodyType.FILE: _file_body,
}

_missing = set(BodyType) - set(_BODY_ASSIGNERS)
if _missing:  # pragma: no cover
    raise RuntimeError(f"No body assigner for: {sorted(m.value for m in _missing)}")


class RequestBuilder:
    def __init__(self, url_builder: UrlBuilder, header_builder: HeaderBuilder):
        self._url_builder = url_builder
        self._header_builder = header_builder

    def apply(
        self,
        token: str,
        endpoint_spec: EndpointSpec,
        request_spec: RequestSpec,
        req: Request,
    ) -> Request:
        """Populate `req` in place and return it."""
        req.url = self._url_builder.build(endpoint_spec, request_spec)
        req.method = endpoint_spec.method
        req.headers = self._header_builder.build(token, endpoint_spec, request_spec)
        req.params = dict(request_spec.params)
        req.body_type = endpoint_spec.body_type
        _BODY_ASSIGNERS[endpoint_spec.body_type](endpoint_spec, request_spec, req)
        return req
