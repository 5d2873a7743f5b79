from __future__ import annotations

import smartsheet_requests
from smartsheet_requests.api import (
    BodyType,
    EndpointSpec,
    HeaderBuilder,
    ObjectFileSpec,
    Placeholder,
    RequestSpec,
    content_disposition,
    merge_headers,
)
from smartsheet_requests.config import ClientConfig
from smartsheet_requests.constants import CSV_TYPE, JSON_TYPE

GET_SHEET = EndpointSpec("GET", ["sheets", Placeholder("sheet_id")])


def _lower_keys(headers: dict[str, str]) -> dict[str, str]:
    return {k.lower(): v for k, v in headers.items()}


def test_merge_headers_later_layers_win_case_insensitively() -> None:
    low = {"Accept": "a", "X-Only-Low": "1"}
    high = {"accept": "b", "X-Only-High": "2"}
    merged = merge_headers(low, high)
    assert merged == {"accept": "b", "X-Only-Low": "1", "X-Only-High": "2"}


def test_merge_headers_is_associative() -> None:
    a = {"Accept": "a", "X-A": "1"}
    b = {"ACCEPT": "b", "X-B": "2"}
    c = {"x-a": "3"}
    assert _lower_keys(merge_headers(merge_headers(a, b), c)) == _lower_keys(
        merge_headers(a, merge_headers(b, c))
    )


def test_merge_headers_skips_empty_layers() -> None:
    assert merge_headers(None, {}, {"A": "1"}) == {"A": "1"}


def test_build_default_and_auth_headers() -> None:
    headers = HeaderBuilder(ClientConfig(token="tok")).build("tok", GET_SHEET, RequestSpec())
    assert headers["Accept"] == JSON_TYPE
    assert headers["Authorization"] == "Bearer tok"
    assert headers["User-Agent"] == f"smartsheet-requests/{smartsheet_requests.__version__}"
    assert "Content-Type" not in headers
    assert "Assume-User" not in headers


def test_build_appends_app_user_agent() -> None:
    config = ClientConfig(token="tok", app_user_agent="my-app/1.2")
    headers = HeaderBuilder(config).build("tok", GET_SHEET, RequestSpec())
    assert headers["User-Agent"].endswith("/my-app/1.2")


def test_build_adds_encoded_assume_user_header() -> None:
    config = ClientConfig(token="tok", assume_user="jane doe@example.com")
    headers = HeaderBuilder(config).build("tok", GET_SHEET, RequestSpec())
    assert headers["Assume-User"] == "jane%20doe%40example.com"


def test_endpoint_headers_override_defaults_and_caller_overrides_win() -> None:
    as_csv = EndpointSpec("GET", ["sheets", Placeholder("sheet_id")], headers={"Accept": CSV_TYPE})
    builder = HeaderBuilder(ClientConfig(token="tok"))

    headers = builder.build("tok", as_csv, RequestSpec())
    assert _lower_keys(headers)["accept"] == CSV_TYPE

    headers = builder.build(
        "tok", as_csv, RequestSpec(header_overrides={"accept": "application/pdf"})
    )
    assert _lower_keys(headers)["accept"] == "application/pdf"
    assert [k.lower() for k in headers].count("accept") == 1


def test_caller_can_override_authorization() -> None:
    headers = HeaderBuilder(ClientConfig(token="tok")).build(
        "tok", GET_SHEET, RequestSpec(header_overrides={"authorization": "Bearer other"})
    )
    assert _lower_keys(headers)["authorization"] == "Bearer other"


def test_json_endpoint_sets_content_type() -> None:
    create = EndpointSpec("POST", ["sheets"], body_type=BodyType.JSON)
    headers = HeaderBuilder(ClientConfig(token="tok")).build("tok", create, RequestSpec())
    assert headers["Content-Type"] == JSON_TYPE


def test_file_endpoint_derives_content_headers_from_file_spec() -> None:
    import_sheet = EndpointSpec("POST", ["sheets", "import"], body_type=BodyType.FILE)
    builder = HeaderBuilder(ClientConfig(token="tok"))

    spec = RequestSpec(file_spec=ObjectFileSpec(b"a,b\n", 4, CSV_TYPE))
    headers = builder.build("tok", import_sheet, spec)
    assert headers["Content-Type"] == CSV_TYPE
    assert headers["Content-Length"] == "4"
    assert "Content-Disposition" not in headers

    named = RequestSpec(file_spec=ObjectFileSpec(b"a,b\n", 4, CSV_TYPE, filename="data.csv"))
    headers = builder.build("tok", import_sheet, named)
    assert headers["Content-Disposition"] == 'attachment; filename="data.csv"'


def test_content_disposition_encodes_non_ascii_filenames() -> None:
    assert content_disposition("data.csv") == 'attachment; filename="data.csv"'
    assert content_disposition('say "hi".csv') == 'attachment; filename="say \\"hi\\".csv"'
    assert content_disposition("données.csv") == "attachment; filename*=UTF-8''donn%C3%A9es.csv"

    import_sheet = EndpointSpec("POST", ["sheets", "import"], body_type=BodyType.FILE)
    spec = RequestSpec(file_spec=ObjectFileSpec(b"a\n", 2, CSV_TYPE, filename="数据.csv"))
    headers = HeaderBuilder(ClientConfig(token="tok")).build("tok", import_sheet, spec)
    headers["Content-Disposition"].encode("ascii")
