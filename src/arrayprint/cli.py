"""Root CLI group for arrayprint with global flags and command registration."""

from __future__ import annotations

import click

from arrayprint import __version__
from arrayprint.commands import register_commands
from arrayprint.commands._base import ArrayGroup
from arrayprint.commands._context import AppContext
from arrayprint.config.settings import ArraySettings


@click.group(cls=ArrayGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="arrayprint")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("--table", is_flag=True, help="Render containers as tables.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Config file path; invalid contents are an error.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    table: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """arrayprint — print a fixed array and a fixed 3x3 matrix.

    With no subcommand, prints both.
    """
    # Unset flags stay out of init kwargs so env vars and TOML can supply them.
    flags = {
        "json_output": json_output,
        "table": table,
        "verbose": verbose,
        "log_json": log_json,
    }
    settings = ArraySettings.from_cli(
        config_path=config_path,
        **{name: value for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        ctx.exit(ctx.obj.show())


register_commands(cli)
