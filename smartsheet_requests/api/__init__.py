"""
Request composition pipeline: specs, builders, file payloads and collaborators.
"""

from __future__ import annotations

from .file_spec import FileSpec, ObjectFileSpec, PathFileSpec
from .headers import HeaderBuilder, content_disposition, merge_headers, user_agent_value
from .request import Request
from .request_builder import RequestBuilder
from .request_client import AsyncRequestClient, RequestClient
from .request_logger import LoggingRequestLogger, MuteRequestLogger, RequestLogger
from .specs import BodyType, EndpointSpec, HttpMethod, Placeholder, RequestSpec, parse_template
from .transport import AsyncHttpxTransport, AsyncTransport, HttpxTransport, Transport
from .urls import UrlBuilder

__all__ = [
    "AsyncHttpxTransport",
    "AsyncRequestClient",
    "AsyncTransport",
    "BodyType",
    "EndpointSpec",
    "FileSpec",
    "HeaderBuilder",
    "HttpMethod",
    "HttpxTransport",
    "LoggingRequestLogger",
    "MuteRequestLogger",
    "ObjectFileSpec",
    "PathFileSpec",
    "Placeholder",
    "Request",
    "RequestBuilder",
    "RequestClient",
    "RequestLogger",
    "RequestSpec",
    "Transport",
    "UrlBuilder",
    "content_disposition",
    "merge_headers",
    "parse_template",
    "user_agent_value",
]
