"""Root CLI group for personcheck with global flags and command registration."""

from __future__ import annotations

import click

from personcheck import __version__
from personcheck.commands import register_commands
from personcheck.commands._base import PcGroup
from personcheck.commands._context import AppContext
from personcheck.config.settings import PersonCheckSettings


@click.group(cls=PcGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="personcheck")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """personcheck: validate person records, reporting the first failing rule.

    With no subcommand, runs the built-in demonstration.
    """
    settings = PersonCheckSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from personcheck.commands.demo import run

        run(ctx.obj)


register_commands(cli)
