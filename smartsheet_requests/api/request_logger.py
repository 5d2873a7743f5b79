"""
Request logging collaborators.

A logger sees the fully-built request just before it is dispatched. It must not
mutate the request.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from pydantic import BaseModel

from ..constants import HEADER_AUTHORIZATION
from .request import Request

_MAX_BODY_CHARS = 1000


class RequestLogger(Protocol):
    def log_request(self, request: Request) -> None: ...


class MuteRequestLogger:
    """Default logger: does nothing."""

    def log_request(self, request: Request) -> None:
        return None


def redact_authorization(value: str) -> str:
    scheme, _, token = value.partition(" ")
    if not token:
        return "****"
    return f"{scheme} ****{token[-4:]}" if len(token) > 8 else f"{scheme} ****"


def _describe_body(body: Any) -> str:
    if body is None:
        return "<none>"
    if isinstance(body, (bytes, bytearray)):
        return f"<{len(body)} bytes>"
    if hasattr(body, "read"):
        return "<stream>"
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    try:
        text = json.dumps(body, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        text = repr(body)
    if len(text) > _MAX_BODY_CHARS:
        return text[:_MAX_BODY_CHARS] + "...(truncated)"
    return text


class LoggingRequestLogger:
    """Logs requests through the standard `logging` module with the token redacted."""

    def __init__(self, logger: logging.Logger | None = None, *, level: int = logging.DEBUG):
        self._logger = logger or logging.getLogger("smartsheet_requests")
        self._level = level

    def log_request(self, request: Request) -> None:
        if not self._logger.isEnabledFor(self._level):
            return
        headers = {
            k: (redact_authorization(v) if k.lower() == HEADER_AUTHORIZATION.lower() else v)
            for k, v in request.headers.items()
        }
        self._logger.log(self._level, f"Request: {request.method.value} {request.url}")
        if request.params:
            self._logger.log(self._level, f"Params: {request.params}")
        self._logger.log(self._level, f"Headers: {headers}")
        if request.has_body:
            self._logger.log(self._level, f"Body: {_describe_body(request.body)}")
