from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from .config import configured_shortcuts, settings
from .converter import INPUT_FORMATS, parse_math_string
from .logging_setup import setup_logging
from .shortcuts import ShortcutFileError, ShortcutTable, load_shortcuts

logger = logging.getLogger(__name__)

cli = typer.Typer(help="Convert ASCIIMath, UnicodeMath or LaTeX strings to LaTeX")


def _table(shortcuts_file: Optional[Path]) -> ShortcutTable:
    try:
        if shortcuts_file is not None:
            return load_shortcuts(
                shortcuts_file, extend_default=settings.extend_default_shortcuts
            )
        return configured_shortcuts()
    except ShortcutFileError as exc:
        raise typer.BadParameter(str(exc), param_hint="--shortcuts") from exc


def _check_format(fmt: str) -> str:
    if fmt not in INPUT_FORMATS:
        raise typer.BadParameter(
            f"must be one of {', '.join(INPUT_FORMATS)}", param_hint="--format"
        )
    return fmt


def _emit(text: str, table: ShortcutTable, fmt: str, as_json: bool) -> None:
    if len(text) > settings.max_input_length:
        typer.echo(
            f"Input longer than {settings.max_input_length} characters", err=True
        )
        raise typer.Exit(code=1)
    detected, latex = parse_math_string(text, format=fmt, shortcuts=table)
    if as_json:
        typer.echo(json.dumps({"format": detected, "latex": latex}, ensure_ascii=False))
    else:
        typer.echo(latex)


@cli.callback()
def main(
    log_level: str = typer.Option(settings.log_level, help="Logging level"),
) -> None:
    setup_logging(log_level)


@cli.command()
def convert(
    text: str,
    fmt: str = typer.Option(
        settings.default_format, "--format", "-f", help="auto | latex | ascii-math"
    ),
    shortcuts: Optional[Path] = typer.Option(None, help="JSON shortcut file"),
    as_json: bool = typer.Option(False, "--json", help="Print format and LaTeX as JSON"),
) -> None:
    """Convert a single string and print the LaTeX."""
    _emit(text, _table(shortcuts), _check_format(fmt), as_json)


@cli.command("convert-file")
def convert_file(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    fmt: str = typer.Option(
        settings.default_format, "--format", "-f", help="auto | latex | ascii-math"
    ),
    shortcuts: Optional[Path] = typer.Option(None, help="JSON shortcut file"),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per line"),
) -> None:
    """Convert every non-empty line of a text file."""
    table = _table(shortcuts)
    fmt = _check_format(fmt)
    count = 0
    for line in file.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        _emit(line, table, fmt, as_json)
        count += 1
    logger.info("Converted %d lines from %s", count, file)


@cli.command("shortcuts")
def list_shortcuts(
    shortcuts: Optional[Path] = typer.Option(None, help="JSON shortcut file"),
) -> None:
    """List the active shortcut table as trigger/template pairs."""
    table = _table(shortcuts)
    for trigger in sorted(table):
        typer.echo(f"{trigger}\t{table[trigger]}")


@cli.command()
def serve(
    host: str = typer.Option(settings.host, help="Bind host"),
    port: int = typer.Option(settings.port, help="Bind port"),
) -> None:
    """Run the conversion HTTP API."""
    from .server import app

    setup_logging()
    uvicorn.run(app, host=host, port=port, reload=False)


if __name__ == "__main__":
    cli()
