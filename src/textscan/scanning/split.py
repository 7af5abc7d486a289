"""Split a sequence into maximal runs of non-delimiter elements."""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

from .predicates import Predicate, resolve_bounds

__all__ = ["Signal", "RunCallback", "find_first", "for_split", "iter_split"]


class Signal(Enum):
    """Instruction returned by a run callback to the driving loop."""

    CONTINUE = "continue"
    BREAK = "break"


RunCallback = Callable[[int, int], Optional[Signal]]


def find_first(
    seq: Sequence[Any],
    predicate: Predicate,
    begin: int | None = None,
    end: int | None = None,
) -> int:
    """Return the position of the first element matching ``predicate``, or ``end``."""

    start, stop = resolve_bounds(seq, begin, end)
    position = start
    while position != stop and not predicate(seq[position]):
        position += 1
    return position


def iter_split(
    seq: Sequence[Any],
    predicate: Predicate,
    begin: int | None = None,
    end: int | None = None,
) -> Iterator[Tuple[int, int]]:
    """Yield the ``(begin, end)`` bounds of every non-empty run in ``seq``.

    ``predicate`` classifies delimiters; consecutive, leading and trailing
    delimiters never produce empty runs.
    """

    start, stop = resolve_bounds(seq, begin, end)
    position = start
    while position != stop:
        while position != stop and predicate(seq[position]):
            position += 1
        if position == stop:
            return
        run_start = position
        while position != stop and not predicate(seq[position]):
            position += 1
        yield run_start, position


def for_split(
    seq: Sequence[Any],
    predicate: Predicate,
    callback: RunCallback,
    begin: int | None = None,
    end: int | None = None,
) -> None:
    """Invoke ``callback(begin, end)`` once per run until it returns :attr:`Signal.BREAK`."""

    for run_start, run_end in iter_split(seq, predicate, begin, end):
        if callback(run_start, run_end) is Signal.BREAK:
            break
