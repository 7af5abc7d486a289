"""Prefix-directed parsing of ``0x``/``0o``/``0b`` numeric literals."""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple

import numpy as np

from ..scanning.predicates import element_code, resolve_bounds
from .numbers import (
    NumberParseError,
    ParseOutcome,
    _parse_signed,
    split_sign,
    string_to_number,
)
from .types import NumericTarget, resolve_numeric_type

__all__ = ["detect_base", "string_to_number_multibase", "to_number"]

LOGGER = logging.getLogger(__name__)

_ZERO = ord("0")
# keyed by the lower-cased prefix letter
_PREFIX_BASES = {ord("x"): 16, ord("o"): 8, ord("b"): 2}


def detect_base(seq: Sequence[Any], begin: int | None = None, end: int | None = None) -> Tuple[int, int]:
    """Return ``(base, digits_start)`` for the literal starting at ``begin``.

    Plain leading zeros select base 10; they are never an octal marker.
    """

    start, stop = resolve_bounds(seq, begin, end)
    if stop - start >= 2 and element_code(seq[start]) == _ZERO:
        base = _PREFIX_BASES.get(element_code(seq[start + 1]) | 0x20)
        if base is not None:
            return base, start + 2
    return 10, start


def string_to_number_multibase(
    seq: Sequence[Any],
    target: NumericTarget = np.int64,
    begin: int | None = None,
    end: int | None = None,
) -> ParseOutcome:
    """Parse a literal whose base is selected by its prefix.

    ``"-0x567.8"`` into ``int32`` yields ``-0x568``; ``"089"`` yields ``89``.
    """

    numeric = resolve_numeric_type(target)
    start, stop = resolve_bounds(seq, begin, end)
    negative, unsigned_start = split_sign(seq, start, stop)
    base, digits_start = detect_base(seq, unsigned_start, stop)
    if digits_start != unsigned_start and digits_start == stop:
        LOGGER.debug("number_parse_failed", extra={"reason": "empty_prefix", "target": numeric.name, "base": base})
        return ParseOutcome(ok=False)
    return _parse_signed(seq, digits_start, stop, numeric, base, negative)


def to_number(text: Sequence[Any], target: NumericTarget = np.int64, base: Optional[int] = None) -> Any:
    """Parse ``text`` or raise :class:`NumberParseError`.

    ``base=None`` lets the literal prefix select the base.
    """

    if base is None:
        outcome = string_to_number_multibase(text, target)
    else:
        outcome = string_to_number(text, target, base)
    if not outcome:
        raise NumberParseError(text, resolve_numeric_type(target).name, base)
    return outcome.value
