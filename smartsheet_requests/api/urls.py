from __future__ import annotations

from urllib.parse import quote

from ..exceptions import MissingPathValueError
from .specs import EndpointSpec, Placeholder, RequestSpec


def _encode_segment(value: object) -> str:
    # ids and names alike: stringify, then escape everything including "/"
    return quote(str(value), safe="")


class UrlBuilder:
    """Resolves an endpoint's path template against a call's path values."""

    def __init__(self, base_url: str):
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def build(self, endpoint_spec: EndpointSpec, request_spec: RequestSpec) -> str:
        """
        Build the absolute URL for a call.

        Raises:
            MissingPathValueError: If a placeholder has no value (or a None value).
        """
        segments: list[str] = []
        for segment in endpoint_spec.path:
            if isinstance(segment, Placeholder):
                value = request_spec.path_values.get(segment.name)
                if value is None:
                    raise MissingPathValueError(segment.name)
                segments.append(_encode_segment(value))
            else:
                segments.append(_encode_segment(segment))

        if not segments:
            return self._base_url
        return f"{self._base_url}/{'/'.join(segments)}"
