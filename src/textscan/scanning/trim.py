"""Narrow a range by dropping boundary delimiters without copying data."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence, Tuple

from .predicates import Predicate, resolve_bounds

__all__ = ["Span", "trim"]


def trim(
    seq: Sequence[Any],
    predicate: Predicate,
    begin: int | None = None,
    end: int | None = None,
) -> Tuple[int, int]:
    """Return the bounds of ``seq[begin:end]`` without leading/trailing delimiters.

    An all-delimiter range collapses to ``begin == end``.
    """

    start, stop = resolve_bounds(seq, begin, end)
    while start != stop and predicate(seq[start]):
        start += 1
    while stop != start and predicate(seq[stop - 1]):
        stop -= 1
    return start, stop


@dataclass
class Span:
    """Mutable half-open view over a borrowed sequence."""

    source: Sequence[Any] = field(repr=False)
    begin: int = 0
    end: int | None = None

    def __post_init__(self) -> None:
        self.begin, self.end = resolve_bounds(self.source, self.begin, self.end)

    def __len__(self) -> int:
        return self.end - self.begin

    def __iter__(self) -> Iterator[Any]:
        for position in range(self.begin, self.end):
            yield self.source[position]

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self):
            raise IndexError("span index out of range")
        return self.source[self.begin + index]

    def trim(self, predicate: Predicate) -> "Span":
        """Trim the bounds in place and return ``self``."""

        self.begin, self.end = trim(self.source, predicate, self.begin, self.end)
        return self

    def value(self) -> Sequence[Any]:
        """Return a slice of the source covering the span."""

        return self.source[self.begin:self.end]
