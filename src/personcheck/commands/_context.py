"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and owns result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from personcheck.config.logging import configure_logging
from personcheck.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from personcheck.config.settings import PersonCheckSettings
    from personcheck.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PersonCheckSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            no_color=self.settings.output.no_color,
            width=self.settings.output.width,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult.

        * Success (``result.ok``): writes to stdout.
        * Failure: writes to stderr.

        A failed validation is a reported outcome, not a process failure:
        the exit status is left untouched either way.
        """
        output = format_result(result, settings=self.output_settings)
        click.echo(output, err=not result.ok)
