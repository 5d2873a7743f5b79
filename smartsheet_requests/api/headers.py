"""
Header composition.

Headers are merged in layers; later layers override earlier ones. Keys compare
case-insensitively and the spelling of the last writer is kept.
"""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote

from .. import __version__
from ..config import ClientConfig
from ..constants import (
    HEADER_ACCEPT,
    HEADER_ASSUME_USER,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_DISPOSITION,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    JSON_TYPE,
    USER_AGENT,
)
from .specs import BodyType, EndpointSpec, RequestSpec


def merge_headers(*layers: Mapping[str, str] | None) -> dict[str, str]:
    """
    Merge header layers, lowest precedence first.

    >>> merge_headers({"Accept": "a", "X-A": "1"}, {"accept": "b"})
    {'accept': 'b', 'X-A': '1'}
    """
    merged: dict[str, tuple[str, str]] = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            # an existing key keeps its position but takes the new spelling
            merged[key.lower()] = (key, str(value))
    return dict(merged.values())


def content_disposition(filename: str) -> str:
    """
    Attachment disposition for `filename`.

    Header values must be ASCII; other names use the RFC 6266 `filename*` form.

    >>> content_disposition("données.csv")
    "attachment; filename*=UTF-8''donn%C3%A9es.csv"
    """
    if filename.isascii():
        escaped = filename.replace('"', '\\"')
        return f'attachment; filename="{escaped}"'
    return f"attachment; filename*=UTF-8''{quote(filename, safe='')}"


def user_agent_value(app_user_agent: str | None = None) -> str:
    base = f"{USER_AGENT}/{__version__}"
    return f"{base}/{app_user_agent}" if app_user_agent else base


class HeaderBuilder:
    """Builds the final header set for a call from the client config and specs."""

    def __init__(self, config: ClientConfig):
        self._config = config

    def build(
        self,
        token: str,
        endpoint_spec: EndpointSpec,
        request_spec: RequestSpec,
    ) -> dict[str, str]:
        return merge_headers(
            self._default_headers(endpoint_spec, request_spec),
            self._auth_headers(token),
            self._assume_user_headers(),
            endpoint_spec.headers,
            request_spec.header_overrides,
        )

    def _default_headers(
        self, endpoint_spec: EndpointSpec, request_spec: RequestSpec
    ) -> dict[str, str]:
        headers = {
            HEADER_ACCEPT: JSON_TYPE,
            HEADER_USER_AGENT: user_agent_value(self._config.app_user_agent),
        }
        if endpoint_spec.body_type is BodyType.JSON:
            headers[HEADER_CONTENT_TYPE] = JSON_TYPE
        elif endpoint_spec.body_type is BodyType.FILE and request_spec.file_spec is not None:
            file_spec = request_spec.file_spec
            headers[HEADER_CONTENT_TYPE] = file_spec.content_type
            headers[HEADER_CONTENT_LENGTH] = str(file_spec.length())
            if file_spec.filename:
                headers[HEADER_CONTENT_DISPOSITION] = content_disposition(file_spec.filename)
        return headers

    def _auth_headers(self, token: str) -> dict[str, str]:
        return {HEADER_AUTHORIZATION: f"Bearer {token}"}

    def _assume_user_headers(self) -> dict[str, str]:
        if not self._config.assume_user:
            return {}
        return {HEADER_ASSUME_USER: quote(self._config.assume_user, safe="")}
