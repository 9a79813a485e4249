"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Picks the output mode (plain, JSON, or table)
and drives the :class:`ArrayPrinter`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from arrayprint.config.logging import configure_logging
from arrayprint.services.printer import ArrayPrinter

if TYPE_CHECKING:
    from arrayprint.config.settings import ArraySettings

logger = logging.getLogger(__name__)


class AppContext:
    """Settings plus the printer, shared through Click's command hierarchy."""

    def __init__(self, settings: ArraySettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        for warning in settings.config_warnings:
            logger.warning(warning)
        if settings.config_path is not None:
            logger.debug("Loaded config from %s", settings.config_path)
        self.printer = ArrayPrinter()

    def show(self, *, array: bool = True, matrix: bool = True) -> int:
        """Write the requested containers in the configured output mode.

        Returns the process exit status, which is always 0.
        """
        if self.settings.json_output:
            from arrayprint.output.formatters import format_result

            result = self.printer.snapshot(
                array=array,
                matrix=matrix,
                warnings=self.settings.config_warnings,
            )
            click.echo(format_result(result, indent=self.settings.output.json_indent))
            return 0

        if self.settings.table:
            from arrayprint.output.renderers import render_tables

            click.echo(
                render_tables(
                    sequence=self.printer.sequence if array else None,
                    grid=self.printer.grid if matrix else None,
                    width=self.settings.output.table_width,
                )
            )
            return 0

        if array and matrix:
            return self.printer.run()
        if array:
            self.printer.print_array_section()
        if matrix:
            self.printer.print_matrix_section()
        return 0
