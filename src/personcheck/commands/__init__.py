"""Subcommand modules for personcheck.

Provides register_commands() which uses deferred imports to keep
``personcheck --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from personcheck.commands.demo import demo
    from personcheck.commands.validate import validate

    cli.add_command(demo)
    cli.add_command(validate)
