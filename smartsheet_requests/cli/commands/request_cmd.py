from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from smartsheet_requests.api.file_spec import PathFileSpec
from smartsheet_requests.api.request import Request
from smartsheet_requests.api.request_client import RequestClient
from smartsheet_requests.api.request_logger import LoggingRequestLogger, redact_authorization
from smartsheet_requests.api.specs import BodyType, EndpointSpec, HttpMethod, RequestSpec
from smartsheet_requests.client import Smartsheet
from smartsheet_requests.constants import (
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_LENGTH,
    file_type_to_content_type,
)

from ..click_compat import RichCommand, click
from ..context import CLIContext
from ..errors import CLIError
from ..runner import CommandOutput, run_command


def _parse_pairs(
    _ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=VALUE, got {raw!r}", param=param)
        pairs[name.strip()] = value
    return pairs


def describe_request(request: Request) -> dict[str, Any]:
    """JSON-safe view of a composed request, with the token redacted."""
    headers = {
        k: (redact_authorization(v) if k.lower() == HEADER_AUTHORIZATION.lower() else v)
        for k, v in request.headers.items()
    }
    body: Any = request.body
    if request.body_type is BodyType.FILE and body is not None:
        length = next(
            (v for k, v in request.headers.items() if k.lower() == HEADER_CONTENT_LENGTH.lower()),
            "?",
        )
        body = f"<file: {length} bytes>"
    data: dict[str, Any] = {
        "method": request.method.value,
        "url": request.url,
        "bodyType": request.body_type.value,
    }
    if body is not None:
        data["body"] = body
    data["params"] = dict(request.params)
    data["headers"] = headers
    return data


class _DryRunTransport:
    """Returns a description of the request instead of sending it."""

    def execute(self, request: Request) -> dict[str, Any]:
        return describe_request(request)


def _build_request_spec(
    *,
    path_values: dict[str, str],
    params: dict[str, str],
    headers: dict[str, str],
    body: str | None,
    file_path: Path | None,
    file_type: str | None,
) -> tuple[RequestSpec, BodyType]:
    if body is not None and file_path is not None:
        raise CLIError("Use either --body or --file, not both.")

    parsed_body: Any = None
    file_spec = None
    body_type = BodyType.NONE
    if body is not None:
        try:
            parsed_body = json.loads(body)
        except json.JSONDecodeError as e:
            raise CLIError(f"--body must be valid JSON: {e.msg}") from e
        body_type = BodyType.JSON
    if file_path is not None:
        if not file_type:
            raise CLIError("--file requires --file-type.")
        file_spec = PathFileSpec(file_path, file_type_to_content_type(file_type))
        body_type = BodyType.FILE

    spec = RequestSpec(
        params=params,
        header_overrides=headers,
        body=parsed_body,
        file_spec=file_spec,
        path_values=path_values,
    )
    return spec, body_type


def _response_data(response: Any) -> tuple[dict[str, Any], int]:
    try:
        payload: Any = response.json()
    except ValueError:
        payload = response.text
    data = {"status": response.status_code, "body": payload}
    return data, 0 if response.is_success else 1


@click.command(name="request", cls=RichCommand)
@click.argument(
    "method",
    type=click.Choice([m.value for m in HttpMethod], case_sensitive=False),
)
@click.argument("template", type=str)
@click.option(
    "--path",
    "-p",
    "path_values",
    multiple=True,
    callback=_parse_pairs,
    metavar="NAME=VALUE",
    help="Value for a {placeholder} in TEMPLATE (repeatable).",
)
@click.option(
    "--param",
    "params",
    multiple=True,
    callback=_parse_pairs,
    metavar="NAME=VALUE",
    help="Query parameter (repeatable).",
)
@click.option(
    "--header",
    "headers",
    multiple=True,
    callback=_parse_pairs,
    metavar="NAME=VALUE",
    help="Header override (repeatable, highest precedence).",
)
@click.option("--body", type=str, default=None, help="JSON request body.")
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=True, path_type=Path),
    default=None,
    help="File to upload as the raw request body.",
)
@click.option("--file-type", type=str, default=None, help="Type of --file (csv, xlsx).")
@click.option("--dry-run", is_flag=True, help="Print the composed request without sending it.")
@click.pass_obj
def request_cmd(
    ctx: CLIContext,
    *,
    method: str,
    template: str,
    path_values: dict[str, str],
    params: dict[str, str],
    headers: dict[str, str],
    body: str | None,
    file_path: Path | None,
    file_type: str | None,
    dry_run: bool,
) -> None:
    """
    Compose a request for METHOD TEMPLATE and send it.

    TEMPLATE is a path such as "sheets/{sheet_id}" resolved under the base URL.
    """

    def fn(ctx: CLIContext) -> CommandOutput:
        request_spec, body_type = _build_request_spec(
            path_values=path_values,
            params=params,
            headers=headers,
            body=body,
            file_path=file_path,
            file_type=file_type,
        )
        try:
            endpoint_spec = EndpointSpec.from_template(method, template, body_type=body_type)
        except ValueError as e:
            raise CLIError(str(e)) from e

        config = ctx.resolve_config()
        if dry_run:
            client = RequestClient(config, _DryRunTransport())
            return CommandOutput(
                data=client.make_request(endpoint_spec, request_spec),
                dry_run=True,
            )

        with Smartsheet.from_config(config, logger=LoggingRequestLogger()) as smartsheet:
            response = smartsheet.make_request(endpoint_spec, request_spec)
            data, exit_code = _response_data(response)
        return CommandOutput(data=data, exit_code=exit_code)

    run_command(ctx, command="request", fn=fn)
