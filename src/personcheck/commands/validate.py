"""Command: validate a single person record given on the command line."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from personcheck.commands._base import PcCommand

if TYPE_CHECKING:
    from personcheck.commands._context import AppContext


@click.command(
    cls=PcCommand,
    examples="""\
  personcheck validate --name Steven --dob 1986-04-17 --borough 3
  personcheck validate --dob 1986-04-17
  personcheck --json validate --name Dave --dob 1904-11-04""",
)
@click.option("--name", default=None, help="Person's name (omit for absent).")
@click.option(
    "--dob",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Date of birth, YYYY-MM-DD (omit for absent).",
)
@click.option("--borough", type=int, default=None, help="Borough identifier.")
@click.option("--label", default="Input", show_default=True, help="Label used in the report line.")
@click.pass_obj
def validate(
    app: AppContext,
    name: str | None,
    dob: datetime | None,
    borough: int | None,
    label: str,
) -> None:
    """Validate one record; failures are reported on stderr."""
    from personcheck.domain.models import PersonInput
    from personcheck.services.validator import ValidationService

    date_of_birth = dob.date() if dob is not None else None
    person = PersonInput(name=name, date_of_birth=date_of_birth, borough=borough)
    app.emit(ValidationService().validate(person, label=label))
