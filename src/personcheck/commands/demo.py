"""Command: run the four demonstration inputs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from personcheck.commands._base import PcCommand

if TYPE_CHECKING:
    from personcheck.commands._context import AppContext

logger = logging.getLogger(__name__)


def run(app: AppContext) -> None:
    """Validate and report each demonstration input in declaration order."""
    from personcheck.services.demo import run_demo

    results = run_demo()
    logger.debug("Demo validated %d inputs", len(results))
    for result in results:
        app.emit(result)


@click.command(
    cls=PcCommand,
    examples="""\
  personcheck
  personcheck demo
  personcheck --json demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Validate the built-in demonstration records."""
    run(app)
