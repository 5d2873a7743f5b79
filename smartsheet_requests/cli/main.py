from __future__ import annotations

from pathlib import Path

import smartsheet_requests

from .click_compat import RichGroup, click
from .context import CLIContext
from .logging import configure_logging, restore_logging


@click.group(
    name="smartsheet-requests",
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    cls=RichGroup,
)
@click.option(
    "--output",
    type=click.Choice(["table", "json"]),
    default="table",
)
@click.option("--json", "json_flag", is_flag=True, help="Alias for --output json.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-essential stderr output.")
@click.option("-v", "verbose", count=True, help="Increase verbosity (-v, -vv).")
@click.option("--dotenv/--no-dotenv", default=False, help="Opt-in .env loading.")
@click.option("--env-file", type=click.Path(dir_okay=False), default=".env")
@click.option(
    "--token",
    type=str,
    default=None,
    envvar="SMARTSHEET_ACCESS_TOKEN",
    show_envvar=True,
    help="API access token.",
)
@click.option("--base-url", type=str, default=None, help="Override the API base URL.")
@click.option("--app-user-agent", type=str, default=None, help="Suffix for the User-Agent header.")
@click.option("--assume-user", type=str, default=None, help="Impersonate this user (admin only).")
@click.version_option(version=smartsheet_requests.__version__, prog_name="smartsheet-requests")
@click.pass_context
def cli(
    click_ctx: click.Context,
    *,
    output: str,
    json_flag: bool,
    quiet: bool,
    verbose: int,
    dotenv: bool,
    env_file: str,
    token: str | None,
    base_url: str | None,
    app_user_agent: str | None,
    assume_user: str | None,
) -> None:
    if click_ctx.invoked_subcommand is None:
        # No args: show help; no network calls.
        click.echo(click_ctx.get_help())
        raise click.exceptions.Exit(0)

    click_ctx.obj = CLIContext(
        output="json" if json_flag else output,  # type: ignore[arg-type]
        quiet=quiet,
        verbosity=verbose,
        dotenv=dotenv,
        env_file=Path(env_file),
        token=token,
        base_url=base_url,
        app_user_agent=app_user_agent,
        assume_user=assume_user,
    )

    previous_logging = configure_logging(verbosity=verbose)
    click_ctx.call_on_close(lambda: restore_logging(previous_logging))


# Register commands
from .commands.request_cmd import request_cmd as _request_cmd  # noqa: E402
from .commands.version_cmd import version_cmd as _version_cmd  # noqa: E402

cli.add_command(_version_cmd)
cli.add_command(_request_cmd)
