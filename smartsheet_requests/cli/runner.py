from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from smartsheet_requests.exceptions import SmartsheetError

from .click_compat import click
from .context import CLIContext
from .errors import CLIError
from .render import emit_json, render_result
from .results import CommandMeta, CommandResult, ErrorInfo


@dataclass(frozen=True, slots=True)
class CommandOutput:
    data: Any | None = None
    dry_run: bool = False
    exit_code: int = 0


CommandFn = Callable[[CLIContext], CommandOutput]


def _error_info(exc: Exception) -> tuple[ErrorInfo, int]:
    if isinstance(exc, CLIError):
        details = {"hint": exc.hint} if exc.hint else None
        info = ErrorInfo(type=exc.error_type, message=exc.message, details=details)
        return info, exc.exit_code
    if isinstance(exc, SmartsheetError):
        return ErrorInfo(type=type(exc).__name__, message=exc.message), 2
    if isinstance(exc, httpx.HTTPError):
        return ErrorInfo(type="network_error", message=str(exc) or type(exc).__name__), 1
    return ErrorInfo(type="internal_error", message=f"{type(exc).__name__}: {exc}"), 1


def emit_result(ctx: CLIContext, result: CommandResult) -> None:
    if ctx.output == "json":
        emit_json(result)
        return
    render_result(result, quiet=ctx.quiet)


def run_command(ctx: CLIContext, *, command: str, fn: CommandFn) -> None:
    started = time.time()
    try:
        out = fn(ctx)
        result = CommandResult(
            ok=True,
            command=command,
            data=out.data,
            meta=CommandMeta(
                duration_ms=int((time.time() - started) * 1000),
                dry_run=out.dry_run,
            ),
        )
        emit_result(ctx, result)
        raise click.exceptions.Exit(out.exit_code)
    except click.exceptions.Exit:
        raise
    except Exception as exc:
        error, code = _error_info(exc)
        result = CommandResult(
            ok=False,
            command=command,
            meta=CommandMeta(duration_ms=int((time.time() - started) * 1000)),
            error=error,
        )
        emit_result(ctx, result)
        raise click.exceptions.Exit(code) from exc
