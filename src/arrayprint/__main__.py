"""Allow ``python -m arrayprint``."""

from arrayprint.cli import cli

cli(prog_name="arrayprint")
