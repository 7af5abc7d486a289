"""Numeric literal parsers for fixed and prefix-selected bases."""

from .multibase import detect_base, string_to_number_multibase, to_number
from .numbers import (
    MAX_BASE,
    MIN_BASE,
    NumberParseError,
    ParseOutcome,
    digit_value,
    parse_magnitude_negative,
    string_to_number,
)
from .types import NumericType, resolve_numeric_type

__all__ = [
    "MAX_BASE",
    "MIN_BASE",
    "NumberParseError",
    "NumericType",
    "ParseOutcome",
    "detect_base",
    "digit_value",
    "parse_magnitude_negative",
    "resolve_numeric_type",
    "string_to_number",
    "string_to_number_multibase",
    "to_number",
]
