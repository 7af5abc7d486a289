from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import typer
from dotenv import find_dotenv, load_dotenv

from .._version import __version__
from ..config import get_settings
from ..parsers import string_to_number, string_to_number_multibase
from ..parsers.numbers import MAX_BASE, MIN_BASE
from ..scanning import Signal, for_split, make_delimiter_predicate, trim
from .config import app as config_app
from .options import outcome_payload, resolve_target
from .scan import scan_command

__all__ = ["app", "run"]


app = typer.Typer(help="Predicate-driven text scanning and numeric literal parsing", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show textscan version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"textscan {__version__}")
        raise typer.Exit()
    load_dotenv(find_dotenv(usecwd=True))
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _echo_outcome(payload: Dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    if not payload["ok"]:
        raise typer.Exit(code=1)


@app.command("split")
def split_command(
    text: str = typer.Argument(..., help="Text to split"),
    delimiters: Optional[str] = typer.Option(None, "--delimiters", help="Delimiter characters (default: settings)"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Stop after this many runs"),
) -> None:
    """Print the non-empty runs of TEXT between delimiters."""

    predicate = make_delimiter_predicate(delimiters or get_settings().delimiters)
    runs: List[Dict[str, Any]] = []

    def collect(begin: int, end: int) -> Signal:
        runs.append({"begin": begin, "end": end, "text": text[begin:end]})
        if limit is not None and len(runs) >= limit:
            return Signal.BREAK
        return Signal.CONTINUE

    for_split(text, predicate, collect)
    typer.echo(json.dumps({"count": len(runs), "runs": runs}, indent=2, ensure_ascii=False))


@app.command("trim")
def trim_command(
    text: str = typer.Argument(..., help="Text to trim"),
    delimiters: Optional[str] = typer.Option(None, "--delimiters", help="Delimiter characters (default: settings)"),
) -> None:
    """Print TEXT without leading and trailing delimiters."""

    predicate = make_delimiter_predicate(delimiters or get_settings().delimiters)
    begin, end = trim(text, predicate)
    typer.echo(json.dumps({"begin": begin, "end": end, "text": text[begin:end]}, indent=2, ensure_ascii=False))


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Literal to parse; use '--' before negative values"),
    numeric_type: Optional[str] = typer.Option(None, "--type", help="numpy target type, e.g. int32 or float64"),
    base: Optional[int] = typer.Option(None, "--base", min=MIN_BASE, max=MAX_BASE, help="Digit base"),
) -> None:
    """Parse TEXT in a fixed base."""

    numeric = resolve_target(numeric_type)
    active_base = base or get_settings().default_base
    outcome = string_to_number(text, numeric, active_base)
    _echo_outcome(outcome_payload(text, numeric, active_base, outcome))


@app.command("multibase")
def multibase_command(
    text: str = typer.Argument(..., help="Literal with optional 0x/0o/0b prefix"),
    numeric_type: Optional[str] = typer.Option(None, "--type", help="numpy target type, e.g. int32 or float64"),
) -> None:
    """Parse TEXT choosing the base from its prefix."""

    numeric = resolve_target(numeric_type)
    outcome = string_to_number_multibase(text, numeric)
    _echo_outcome(outcome_payload(text, numeric, None, outcome))


app.command("scan", help="Parse every token of a text file into JSONL records.")(scan_command)
app.add_typer(config_app, name="config")


def run() -> None:
    """Entry point compatible with ``python -m textscan.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":
    run()
