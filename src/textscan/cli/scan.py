"""Tokenize a text file and parse every token as a numeric literal."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from tqdm import tqdm

from ..config import get_settings
from ..parsers import string_to_number_multibase
from ..scanning import iter_split, make_delimiter_predicate
from ..utils.logging import configure_json_logger, flush_handlers, log_event
from .options import resolve_target

__all__ = ["scan_command"]


def scan_command(
    input_path: Path = typer.Option(..., "--input", exists=True, dir_okay=False, help="UTF-8 text file to scan"),
    output_path: Path = typer.Option(..., "--output", dir_okay=False, help="Destination JSONL, one record per token"),
    numeric_type: Optional[str] = typer.Option(None, "--type", help="numpy target type, e.g. int32 or float64"),
    delimiters: Optional[str] = typer.Option(None, "--delimiters", help="Delimiter characters (default: settings)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="Optional JSONL log path"),
    debug: bool = typer.Option(False, "--debug", help="Log the reason of every rejected token"),
) -> None:
    settings = get_settings()
    numeric = resolve_target(numeric_type)
    predicate = make_delimiter_predicate(delimiters or settings.delimiters)

    logger = configure_json_logger(log_file or settings.log_path, level=logging.DEBUG if debug else logging.INFO)
    trace_id = log_event(
        logger,
        "scan.start",
        input=str(input_path),
        output=str(output_path),
        target=numeric.name,
    )

    lines = input_path.read_text(encoding="utf-8").splitlines()
    tokens = parsed = 0
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as sink:
        for line_no, line in enumerate(tqdm(lines, desc="Scanning", unit="line"), start=1):
            for begin, end in iter_split(line, predicate):
                outcome = string_to_number_multibase(line, numeric, begin, end)
                tokens += 1
                if outcome:
                    parsed += 1
                record = {
                    "line": line_no,
                    "begin": begin,
                    "end": end,
                    "token": line[begin:end],
                    "ok": outcome.ok,
                    "value": outcome.value.item() if outcome else None,
                }
                sink.write(json.dumps(record, ensure_ascii=False) + "\n")

    summary = {
        "output": str(output_path),
        "lines": len(lines),
        "tokens": tokens,
        "parsed": parsed,
        "rejected": tokens - parsed,
    }
    log_event(logger, "scan.completed", trace_id=trace_id, **summary)
    flush_handlers(logger)
    typer.echo(json.dumps(summary, indent=2, ensure_ascii=False))
