"""
Smartsheet request composition layer.

Compiles endpoint descriptions and per-call parameters into HTTP requests and
dispatches them through an injectable transport.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .api import (
    AsyncRequestClient,
    BodyType,
    EndpointSpec,
    FileSpec,
    HttpMethod,
    LoggingRequestLogger,
    MuteRequestLogger,
    ObjectFileSpec,
    PathFileSpec,
    Placeholder,
    Request,
    RequestClient,
    RequestSpec,
)
from .client import AsyncSmartsheet, Smartsheet
from .config import ClientConfig
from .constants import FileType, file_type_to_content_type
from .exceptions import (
    ConfigurationError,
    FileSpecError,
    ImportFileNotFoundError,
    ImportFileUnreadableError,
    MissingPathValueError,
    SmartsheetError,
    UnsupportedFileTypeError,
)

__all__ = [
    "__version__",
    # Clients
    "Smartsheet",
    "AsyncSmartsheet",
    "ClientConfig",
    "RequestClient",
    "AsyncRequestClient",
    # Specs
    "EndpointSpec",
    "RequestSpec",
    "Placeholder",
    "HttpMethod",
    "BodyType",
    "Request",
    # Files
    "FileSpec",
    "ObjectFileSpec",
    "PathFileSpec",
    "FileType",
    "file_type_to_content_type",
    # Logging
    "MuteRequestLogger",
    "LoggingRequestLogger",
    # Errors
    "SmartsheetError",
    "MissingPathValueError",
    "UnsupportedFileTypeError",
    "FileSpecError",
    "ImportFileNotFoundError",
    "ImportFileUnreadableError",
    "ConfigurationError",
]
