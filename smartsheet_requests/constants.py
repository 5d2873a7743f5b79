"""
API constants: base URLs, MIME types and the import file type mapping.
"""

from __future__ import annotations

from enum import Enum

from .exceptions import UnsupportedFileTypeError

API_URL = "https://api.smartsheet.com/2.0"
GOV_API_URL = "https://api.smartsheetgov.com/2.0"

USER_AGENT = "smartsheet-requests"

JSON_TYPE = "application/json"
CSV_TYPE = "text/csv"
EXCEL_TYPE = "application/vnd.ms-excel"
PDF_TYPE = "application/pdf"
OPENXML_SPREADSHEET_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

HEADER_ACCEPT = "Accept"
HEADER_ASSUME_USER = "Assume-User"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_DISPOSITION = "Content-Disposition"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"


class FileType(str, Enum):
    """File types accepted by the sheet import endpoints."""

    CSV = "csv"
    XLSX = "xlsx"


_FILE_TYPE_CONTENT_TYPES: dict[FileType, str] = {
    FileType.CSV: CSV_TYPE,
    FileType.XLSX: OPENXML_SPREADSHEET_TYPE,
}


def file_type_to_content_type(file_type: FileType | str) -> str:
    """
    Map a caller-facing file type tag to its MIME content type.

    Args:
        file_type: A `FileType` member or its tag (case-insensitive), e.g. "csv".

    Raises:
        UnsupportedFileTypeError: If the tag is not a known file type. The
            message lists every valid tag.
    """
    valid = [ft.value for ft in FileType]
    try:
        key = FileType(file_type.lower() if isinstance(file_type, str) else file_type)
    except ValueError:
        raise UnsupportedFileTypeError(str(file_type), valid) from None
    return _FILE_TYPE_CONTENT_TYPES[key]
