"""Fixed-base numeric parsing over borrowed character sequences.

Digits are accumulated into the negative domain of the target type so that the
most negative value of a signed integer never requires computing its
unrepresentable positive magnitude. Positive literals are negated back at the
end, which is the only step where the range asymmetry can fail.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional, Sequence, Union

import numpy as np

from ..scanning.predicates import element_code, resolve_bounds
from ..scanning.split import find_first
from .types import NumericTarget, NumericType, resolve_numeric_type

__all__ = [
    "MAX_BASE",
    "MIN_BASE",
    "NumberParseError",
    "ParseOutcome",
    "digit_value",
    "parse_magnitude_negative",
    "split_sign",
    "string_to_number",
]

LOGGER = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 36

_DOT = ord(".")
_MINUS = ord("-")
# fractions below 2 ** -1200 round to zero in every supported float width
_UNDERFLOW_DENOMINATOR = 1 << 1200

Number = Union[int, float]


@dataclass(frozen=True)
class ParseOutcome:
    """Success flag plus the parsed value (``None`` on failure)."""

    ok: bool
    value: Any = None

    def __bool__(self) -> bool:
        return self.ok


_FAILED = ParseOutcome(ok=False)


class NumberParseError(ValueError):
    """Raised by the convenience wrappers when a literal cannot be parsed."""

    def __init__(self, text: Any, target: str, base: Optional[int] = None) -> None:
        self.text = text
        self.target = target
        self.base = base
        base_label = "auto" if base is None else str(base)
        super().__init__(f"Cannot parse {text!r} as {target} (base {base_label})")


def digit_value(element: Any) -> int:
    """Return the digit value of ``element`` (0-35, letters case-insensitive) or -1."""

    code = element_code(element)
    if 48 <= code <= 57:
        return code - 48
    lowered = code | 0x20
    if 97 <= lowered <= 122:
        return lowered - 87
    return -1


def _reject(reason: str, numeric: NumericType, base: int) -> None:
    LOGGER.debug("number_parse_failed", extra={"reason": reason, "target": numeric.name, "base": base})
    return None


def _is_dot(element: Any) -> bool:
    return element_code(element) == _DOT


def _negative_magnitude(
    seq: Sequence[Any], start: int, stop: int, numeric: NumericType, base: int
) -> Optional[Number]:
    if not MIN_BASE <= base <= MAX_BASE:
        return _reject("unsupported_base", numeric, base)
    if start == stop:
        return _reject("empty", numeric, base)

    dot = find_first(seq, _is_dot, start, stop)
    if dot == start:
        return _reject("missing_integer_digits", numeric, base)
    if dot != stop and dot + 1 == stop:
        return _reject("missing_fraction_digits", numeric, base)

    # unsigned targets have no negative domain to borrow
    step = 1 if numeric.is_unsigned else -1
    total = 0
    for position in range(start, dot):
        digit = digit_value(seq[position])
        if not 0 <= digit < base:
            return _reject("invalid_digit", numeric, base)
        total = total * base + step * digit
        if not numeric.contains(total):
            return _reject("overflow", numeric, base)

    if numeric.is_integer:
        return _round_fraction(seq, dot + 1, stop, numeric, base, total, step)
    return _add_fraction(seq, dot + 1, stop, numeric, base, total)


def _round_fraction(
    seq: Sequence[Any], start: int, stop: int, numeric: NumericType, base: int, total: int, step: int
) -> Optional[int]:
    """Round ``total`` half away from zero using only the fraction digits.

    In an even base the first digit decides. In an odd base one half is the
    digit ``base // 2`` repeated forever, so the first digit that differs from
    it decides and a finite run of it stays below one half.
    """

    half = base // 2
    round_up: Optional[bool] = None
    for position in range(start, stop):
        digit = digit_value(seq[position])
        if not 0 <= digit < base:
            return _reject("invalid_digit", numeric, base)
        if round_up is None:
            if base % 2 == 0:
                round_up = digit >= half
            elif digit != half:
                round_up = digit > half

    if round_up:
        total += step
        if not numeric.contains(total):
            return _reject("overflow", numeric, base)
    return total


def _add_fraction(
    seq: Sequence[Any], start: int, stop: int, numeric: NumericType, base: int, total: int
) -> Optional[float]:
    """Subtract the fraction digits from ``total`` and round once to a float.

    Digits beyond the target's precision only set a sticky bit, so the
    accumulators stay bounded however long the fraction is.
    """

    precision = 1 << (numeric.mantissa_bits + 16)
    numerator, denominator = 0, 1
    sticky = False
    for position in range(start, stop):
        digit = digit_value(seq[position])
        if not 0 <= digit < base:
            return _reject("invalid_digit", numeric, base)
        if total:
            keep = denominator < precision
        else:
            keep = numerator < precision and denominator < _UNDERFLOW_DENOMINATOR
        if keep:
            numerator = numerator * base + digit
            denominator *= base
        elif digit:
            sticky = True

    if sticky:
        numerator, denominator = 2 * numerator + 1, 2 * denominator
    if not numerator:
        return float(total)
    value = float(total - Fraction(numerator, denominator))
    if not numeric.contains(value):
        return _reject("overflow", numeric, base)
    return value


def _parse_signed(
    seq: Sequence[Any], start: int, stop: int, numeric: NumericType, base: int, negative: bool
) -> ParseOutcome:
    magnitude = _negative_magnitude(seq, start, stop, numeric, base)
    if magnitude is None:
        return _FAILED

    if numeric.is_unsigned:
        if negative and magnitude != 0:
            _reject("negative_unsigned", numeric, base)
            return _FAILED
        return ParseOutcome(ok=True, value=numeric.cast(magnitude))

    if negative:
        return ParseOutcome(ok=True, value=numeric.cast(magnitude))

    value = -magnitude if numeric.is_integer else 0.0 - magnitude
    if not numeric.contains(value):
        _reject("positive_overflow", numeric, base)
        return _FAILED
    return ParseOutcome(ok=True, value=numeric.cast(value))


def parse_magnitude_negative(
    seq: Sequence[Any],
    target: NumericTarget = np.int64,
    base: int = 10,
    begin: int | None = None,
    end: int | None = None,
) -> ParseOutcome:
    """Parse unsigned digits and return the negated magnitude.

    ``"856"`` into ``int32`` yields ``-856``. Unsigned targets have no negative
    domain and receive the magnitude unchanged. Fails on an empty range, a
    character that is not a digit in ``base`` or a magnitude the target cannot
    hold even in negative form.
    """

    numeric = resolve_numeric_type(target)
    start, stop = resolve_bounds(seq, begin, end)
    magnitude = _negative_magnitude(seq, start, stop, numeric, base)
    if magnitude is None:
        return _FAILED
    return ParseOutcome(ok=True, value=numeric.cast(magnitude))


def split_sign(seq: Sequence[Any], start: int, stop: int) -> tuple[bool, int]:
    """Consume an optional leading ``-`` and return ``(negative, digits_start)``."""

    if start != stop and element_code(seq[start]) == _MINUS:
        return True, start + 1
    return False, start


def string_to_number(
    seq: Sequence[Any],
    target: NumericTarget = np.int64,
    base: int = 10,
    begin: int | None = None,
    end: int | None = None,
) -> ParseOutcome:
    """Parse an optionally negative literal in ``base`` into ``target``.

    A fractional part is rounded half away from zero for integral targets and
    added as is for floating targets.
    """

    numeric = resolve_numeric_type(target)
    start, stop = resolve_bounds(seq, begin, end)
    negative, digits_start = split_sign(seq, start, stop)
    return _parse_signed(seq, digits_start, stop, numeric, base, negative)
