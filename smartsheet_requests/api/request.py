from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .specs import BodyType, HttpMethod


@dataclass(slots=True)
class Request:
    """
    Transport-agnostic request, populated by `RequestBuilder`.

    `body` is None when absent, the structured value for JSON bodies (serialized
    by the transport), or a byte stream / bytes for file bodies.
    """

    method: HttpMethod = HttpMethod.GET
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] = field(default_factory=dict)
    body: Any | None = None
    body_type: BodyType = BodyType.NONE
    close_body: bool = False

    @property
    def has_body(self) -> bool:
        return self.body is not None

    def release(self) -> None:
        """Close a body stream the request opened itself; caller streams are left alone."""
        if self.close_body and self.body is not None:
            close = getattr(self.body, "close", None)
            if close is not None:
                close()
            self.close_body = False
