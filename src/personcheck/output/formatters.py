"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (one line per validated record,
optionally followed by the validated fields) or machines (--json).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.text import Text

from personcheck.output.console import create_console, get_output

if TYPE_CHECKING:
    from personcheck.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches derived from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False
    width: int = 120


def _label(result: ServiceResult) -> str:
    if result.meta and "label" in result.meta:
        return str(result.meta["label"])
    return result.op


def _error_message(result: ServiceResult) -> str:
    return result.error.message if result.error else "Unknown error"


def _format_quiet(result: ServiceResult) -> str:
    if result.ok:
        return f"{_label(result)}: ok"
    return f"{_label(result)}: {_error_message(result)}"


def _format_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console(no_color=settings.no_color, width=settings.width)
    line = Text()
    line.append(_label(result), style="pc.label")
    if result.ok:
        line.append(" was ")
        line.append("valid", style="pc.ok")
    else:
        line.append(" was ")
        line.append("invalid", style="pc.error")
        line.append(" with the following errors: ")
        line.append(_error_message(result), style="pc.tag")
    console.print(line, soft_wrap=True)

    if settings.verbose:
        payload = result.data if result.ok else (result.error.detail if result.error else {})
        for key, value in payload.items():
            row = Text("  ")
            row.append(f"{key}:", style="pc.key")
            row.append(f" {value}")
            console.print(row, soft_wrap=True)

    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Rendering switches. When given, ``json_output`` is ignored.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return _format_quiet(result)
    return _format_human(result, settings)
