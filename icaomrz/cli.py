from __future__ import annotations

import json
from pathlib import Path

import typer

from icaomrz.checkdigit import compute_check_digit
from icaomrz.config import configure_logging, load_defaults
from icaomrz.errors import InvalidArgument, MrzError, MrzNotFound, MrzParseError
from icaomrz.finder import find_mrz
from icaomrz.formats import list_formats, split_rows
from icaomrz.models import MrzRecord
from icaomrz.parser import encode as encode_record
from icaomrz.parser import parse as parse_record

app = typer.Typer(help="icaomrz – decode, encode and locate ICAO machine readable zones")

EXIT_INVALID = 1
EXIT_ERROR = 2


def _read_text(file: Path) -> str:
    return file.read_text(encoding="utf-8").replace("\r\n", "\n").strip()


def render_error(exc: MrzParseError) -> str:
    """The error message followed by the offending row with a caret marker."""
    lines = [exc.message]
    rows = split_rows(exc.source_text)
    location = exc.range
    if exc.source_text and 0 <= location.row < len(rows):
        lines.append(rows[location.row])
        lines.append(" " * location.start + "^" * max(1, location.length))
    return "\n".join(lines)


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=EXIT_ERROR)


@app.command()
def formats():
    for label, geometry in list_formats().items():
        typer.echo(f"{label}\t{geometry['rows']}x{geometry['columns']}")


@app.command()
def parse(
    file: Path = typer.Argument(..., exists=True, readable=True, help="Text file holding the MRZ"),
    find: bool = typer.Option(False, "--find", help="Locate the MRZ inside surrounding text first."),
    strict: bool | None = typer.Option(
        None,
        "--strict/--lenient",
        help="Exit with status 1 when any check digit or date is invalid.",
    ),
    indent: int | None = typer.Option(None, "--indent", help="JSON indentation."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level, e.g. INFO or DEBUG."),
):
    cfg = load_defaults()
    configure_logging(log_level, cfg)
    text = _read_text(file)
    try:
        if find:
            text = find_mrz(text)
        record = parse_record(text)
    except MrzParseError as exc:
        _fail(render_error(exc))
    except (MrzNotFound, InvalidArgument) as exc:
        _fail(str(exc))
    if indent is None:
        indent = cfg.get("output", {}).get("indent", 2)
    typer.echo(json.dumps(record.to_dict(), indent=indent))
    if strict is None:
        strict = bool(cfg.get("parse", {}).get("strict", False))
    if strict and not record.is_valid:
        raise typer.Exit(code=EXIT_INVALID)


@app.command()
def find(
    file: Path = typer.Argument(..., exists=True, readable=True, help="Text file with an embedded MRZ"),
):
    configure_logging()
    try:
        typer.echo(find_mrz(_read_text(file)))
    except MrzParseError as exc:
        _fail(render_error(exc))
    except MrzNotFound as exc:
        _fail(str(exc))


@app.command()
def encode(
    file: Path = typer.Argument(..., exists=True, readable=True, help="JSON record, as printed by `parse`"),
):
    configure_logging()
    data = json.loads(file.read_text(encoding="utf-8"))
    try:
        typer.echo(encode_record(MrzRecord.from_dict(data)), nl=False)
    except (MrzError, ValueError, KeyError) as exc:
        _fail(str(exc))


@app.command("check-digit")
def check_digit(text: str = typer.Argument(..., help="Characters from [0-9A-Z<]")):
    try:
        typer.echo(compute_check_digit(text))
    except MrzParseError as exc:
        _fail(render_error(exc))


if __name__ == "__main__":
    app()
