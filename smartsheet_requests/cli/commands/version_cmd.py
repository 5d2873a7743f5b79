from __future__ import annotations

import platform

import smartsheet_requests

from ..click_compat import RichCommand, click
from ..context import CLIContext
from ..runner import CommandOutput, run_command


@click.command(name="version", cls=RichCommand)
@click.pass_obj
def version_cmd(ctx: CLIContext) -> None:
    """Show version information (no network)."""

    def fn(_: CLIContext) -> CommandOutput:
        return CommandOutput(
            data={
                "version": smartsheet_requests.__version__,
                "pythonVersion": platform.python_version(),
                "platform": platform.platform(),
            }
        )

    run_command(ctx, command="version", fn=fn)
