"""
Endpoint and request specifications.

An `EndpointSpec` describes the static shape of one API operation and is shared
freely; a `RequestSpec` carries the data for a single call.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeAlias

from .file_spec import FileSpec


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class BodyType(Enum):
    """How (and whether) a request body is populated."""

    NONE = "none"
    JSON = "json"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A named path segment filled from `RequestSpec.path_values`."""

    name: str

    def __str__(self) -> str:
        return f"{{{self.name}}}"


Segment: TypeAlias = "str | Placeholder"

_TEMPLATE_PLACEHOLDER = re.compile(r"^\{([A-Za-z_][A-Za-z0-9_]*)\}$")


def parse_template(template: str) -> tuple[Segment, ...]:
    """
    Split a `"sheets/{sheet_id}/rows"` style template into path segments.

    Raises:
        ValueError: If a segment contains braces but is not a whole placeholder.
    """
    segments: list[Segment] = []
    for part in template.strip("/").split("/"):
        if not part:
            continue
        match = _TEMPLATE_PLACEHOLDER.match(part)
        if match:
            segments.append(Placeholder(match.group(1)))
        elif "{" in part or "}" in part:
            raise ValueError(f"Invalid path template segment: {part!r}")
        else:
            segments.append(part)
    return tuple(segments)


def _freeze_headers(headers: Mapping[str, Any] | None) -> Mapping[str, str]:
    return MappingProxyType({str(k): str(v) for k, v in (headers or {}).items()})


@dataclass(frozen=True, slots=True)
class EndpointSpec:
    """
    Static description of an API operation.

    Example:
        ```python
        get_sheet = EndpointSpec("GET", ["sheets", Placeholder("sheet_id")])
        get_as_csv = EndpointSpec.from_template(
            "GET", "sheets/{sheet_id}", headers={"Accept": CSV_TYPE}
        )
        ```
    """

    method: HttpMethod
    path: tuple[Segment, ...]
    # read-only mapping; equality still compares it but hashing skips it
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    body_type: BodyType = BodyType.NONE

    def __init__(
        self,
        method: HttpMethod | str,
        path: Sequence[Segment],
        *,
        headers: Mapping[str, Any] | None = None,
        body_type: BodyType | str = BodyType.NONE,
    ) -> None:
        object.__setattr__(self, "method", HttpMethod(method.upper()))
        object.__setattr__(self, "path", tuple(path))
        object.__setattr__(self, "headers", _freeze_headers(headers))
        object.__setattr__(self, "body_type", BodyType(body_type))

    @classmethod
    def from_template(
        cls,
        method: HttpMethod | str,
        template: str,
        *,
        headers: Mapping[str, Any] | None = None,
        body_type: BodyType | str = BodyType.NONE,
    ) -> EndpointSpec:
        return cls(method, parse_template(template), headers=headers, body_type=body_type)

    @property
    def placeholders(self) -> tuple[str, ...]:
        return tuple(s.name for s in self.path if isinstance(s, Placeholder))

    @property
    def template(self) -> str:
        return "/".join(str(s) for s in self.path)


@dataclass(frozen=True, slots=True)
class RequestSpec:
    """
    Per-call data paired with an `EndpointSpec`.

    `path_values` must cover every placeholder in the endpoint's path; this is
    checked when the URL is built, not here.
    """

    params: Mapping[str, Any] = field(default_factory=dict)
    header_overrides: Mapping[str, str] = field(default_factory=dict)
    body: Any | None = None
    file_spec: FileSpec | None = None
    path_values: Mapping[str, Any] = field(default_factory=dict)
