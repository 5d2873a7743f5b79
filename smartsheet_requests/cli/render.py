from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console
from rich.table import Table

from .results import CommandResult


def emit_json(result: CommandResult) -> None:
    payload = result.model_dump(by_alias=True, mode="json")
    sys.stdout.write(json.dumps(payload, ensure_ascii=False) + "\n")


def _kv_table(title: str, obj: dict[str, Any]) -> Table:
    table = Table(title=title, show_header=False, title_justify="left")
    table.add_column("key", style="bold")
    table.add_column("value", overflow="fold")
    for key, value in obj.items():
        text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)
        table.add_row(str(key), text)
    return table


def render_result(result: CommandResult, *, quiet: bool) -> None:
    if not result.ok:
        stderr = Console(file=sys.stderr, force_terminal=False)
        message = result.error.message if result.error else "Unknown error"
        stderr.print(f"Error: {message}", markup=False, highlight=False)
        hint = (result.error.details or {}).get("hint") if result.error else None
        if hint and not quiet:
            stderr.print(f"Hint: {hint}", markup=False, highlight=False)
        return

    stdout = Console(file=sys.stdout, force_terminal=False, width=120)
    data = result.data
    if not isinstance(data, dict):
        stdout.print(data, markup=False, highlight=False)
        return
    scalars = {k: v for k, v in data.items() if not isinstance(v, dict)}
    if scalars:
        stdout.print(_kv_table(result.command, scalars))
    for key, value in data.items():
        if isinstance(value, dict) and value:
            stdout.print(_kv_table(key, value))
