"""Element helpers shared by the scanning and parsing primitives."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, Tuple

__all__ = [
    "Predicate",
    "element_code",
    "is_whitespace",
    "make_delimiter_predicate",
    "resolve_bounds",
]

Predicate = Callable[[Any], bool]

_WHITESPACE_CODES = frozenset(ord(ch) for ch in " \t\r\n")


def element_code(element: Any) -> int:
    """Return the code point of ``element``.

    Narrow elements come from ``bytes``/``bytearray`` as ints, wide ones from
    ``str`` as 1-char strings or from code point lists as ints.
    """

    if isinstance(element, str):
        return ord(element)
    return int(element)


def is_whitespace(element: Any) -> bool:
    return element_code(element) in _WHITESPACE_CODES


def make_delimiter_predicate(delimiters: Iterable[Any]) -> Predicate:
    """Build a predicate matching any element whose code point is in ``delimiters``."""

    codes = frozenset(element_code(item) for item in delimiters)

    def predicate(element: Any) -> bool:
        return element_code(element) in codes

    return predicate


def resolve_bounds(seq: Sequence[Any], begin: int | None, end: int | None) -> Tuple[int, int]:
    """Clamp ``begin``/``end`` to a valid half-open range over ``seq``."""

    size = len(seq)
    stop = size if end is None else max(0, min(end, size))
    start = 0 if begin is None else max(0, min(begin, stop))
    return start, stop
