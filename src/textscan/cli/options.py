"""Helpers shared by the parsing commands."""
from __future__ import annotations

from typing import Any, Dict, Optional

import typer

from ..config import get_settings
from ..parsers.numbers import ParseOutcome
from ..parsers.types import NumericType, resolve_numeric_type

__all__ = ["outcome_payload", "resolve_target"]


def resolve_target(numeric_type: Optional[str]) -> NumericType:
    """Resolve ``--type`` (or the configured default) into a :class:`NumericType`."""

    target = numeric_type or get_settings().default_type
    try:
        return resolve_numeric_type(target)
    except (TypeError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--type") from exc


def outcome_payload(text: str, numeric: NumericType, base: Optional[int], outcome: ParseOutcome) -> Dict[str, Any]:
    return {
        "text": text,
        "type": numeric.name,
        "base": base if base is not None else "auto",
        "ok": outcome.ok,
        "value": outcome.value.item() if outcome else None,
    }
