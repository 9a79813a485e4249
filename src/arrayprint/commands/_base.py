"""Click base classes whose ``--examples`` lists every output mode.

Every command renders the same containers in one of three modes, so
the examples are generated rather than written per command: one line
per mode, global flags before the subcommand name.
"""

from __future__ import annotations

from typing import Any

import click

PROG_NAME = "arrayprint"

# Global flags selecting each output mode; "" is the plain format.
OUTPUT_MODE_FLAGS: tuple[str, ...] = ("", "--json", "--table")


def build_examples(command: str | None = None, extra: tuple[str, ...] = ()) -> str:
    """Return one example invocation per output mode, then *extra* flag sets."""
    lines = []
    for flags in (*OUTPUT_MODE_FLAGS, *extra):
        words = [PROG_NAME, flags, command or ""]
        lines.append("  " + " ".join(word for word in words if word))
    return "\n".join(lines)


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value:
        return
    cmd = ctx.command
    name = cmd.name if ctx.parent is not None else None
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(build_examples(name, getattr(cmd, "extra_examples", ())))
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show_examples,
        help="Show one example per output mode.",
    )


class ArrayCommand(click.Command):
    """Subcommand with a generated ``--examples`` flag."""

    extra_examples: tuple[str, ...] = ()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.params.append(_examples_option())


class ArrayGroup(click.Group):
    """Root group: generated ``--examples`` plus the logging flag sets."""

    command_class = ArrayCommand
    extra_examples = ("-v", "-v --log-json")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.params.append(_examples_option())
