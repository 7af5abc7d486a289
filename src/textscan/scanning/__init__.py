"""Predicate-driven scanning primitives over borrowed sequences."""

from .predicates import Predicate, element_code, is_whitespace, make_delimiter_predicate
from .split import Signal, find_first, for_split, iter_split
from .trim import Span, trim

__all__ = [
    "Predicate",
    "Signal",
    "Span",
    "element_code",
    "find_first",
    "for_split",
    "is_whitespace",
    "iter_split",
    "make_delimiter_predicate",
    "trim",
]
