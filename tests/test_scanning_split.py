from array import array

import pytest

from textscan.scanning import Signal, find_first, for_split, is_whitespace, iter_split


def test_for_split_counts_runs() -> None:
    count = 0

    def on_run(begin: int, end: int) -> None:
        nonlocal count
        count += 1

    for_split("a b c", is_whitespace, on_run)
    assert count == 3


def test_for_split_run_lengths_over_bytes() -> None:
    samp = b"a b c"
    total = 0

    def on_run(begin: int, end: int) -> None:
        nonlocal total
        total += end - begin

    for_split(samp, is_whitespace, on_run)
    assert total == 3


def test_for_split_break_stops_scan() -> None:
    calls = []

    def on_run(begin: int, end: int) -> Signal:
        calls.append((begin, end))
        return Signal.BREAK if len(calls) == 3 else Signal.CONTINUE

    for_split("a b c e f", is_whitespace, on_run)
    assert len(calls) == 3


def test_for_split_irregular_gaps() -> None:
    text = " a b c  e    f           "
    runs = []
    for_split(text, is_whitespace, lambda begin, end: runs.append(text[begin:end]))
    assert runs == ["a", "b", "c", "e", "f"]


@pytest.mark.parametrize(
    "source",
    [
        "  alpha\tbeta\n gamma ",
        b"  alpha\tbeta\n gamma ",
        [ord(ch) for ch in "  alpha\tbeta\n gamma "],
        array("I", [ord(ch) for ch in "  alpha\tbeta\n gamma "]),
    ],
)
def test_iter_split_is_element_agnostic(source) -> None:
    assert list(iter_split(source, is_whitespace)) == [(2, 7), (8, 12), (14, 19)]


@pytest.mark.parametrize("text", ["", "    ", "\t\r\n"])
def test_iter_split_without_runs(text: str) -> None:
    assert list(iter_split(text, is_whitespace)) == []


def test_iter_split_reconstructs_text_without_delimiters() -> None:
    text = "  one,,two , three,"
    predicate = lambda ch: ch in ", "  # noqa: E731
    runs = list(iter_split(text, predicate))
    assert all(end > begin for begin, end in runs)
    assert "".join(text[begin:end] for begin, end in runs) == "".join(ch for ch in text if ch not in ", ")


def test_iter_split_honours_bounds() -> None:
    text = "xx a b yy"
    assert [text[b:e] for b, e in iter_split(text, is_whitespace, 2, 7)] == ["a", "b"]


def test_find_first() -> None:
    assert find_first("ab cd", is_whitespace) == 2
    assert find_first("abcd", is_whitespace) == 4
    assert find_first("a b c", is_whitespace, 2, 3) == 3
