import pytest

from textscan.scanning import Span, is_whitespace, make_delimiter_predicate, trim


@pytest.mark.parametrize(
    "source",
    [" a ", b" a ", [32, 97, 32]],
)
def test_trim_single_element(source) -> None:
    begin, end = trim(source, is_whitespace)
    assert end - begin == 1
    assert begin == 1


def test_trim_wide_leading() -> None:
    text = [ord(ch) for ch in " true"]
    begin, end = trim(text, is_whitespace)
    assert end - begin == 4
    assert chr(text[begin]) == "t"


def test_trim_trailing_only() -> None:
    assert trim("a   ", is_whitespace) == (0, 1)


def test_trim_all_delimiters_collapses() -> None:
    begin, end = trim("               ", is_whitespace)
    assert begin == end


def test_trim_keeps_interior_delimiters_and_is_idempotent() -> None:
    text = "\t hello  world \n"
    begin, end = trim(text, is_whitespace)
    assert text[begin:end] == "hello  world"
    assert trim(text, is_whitespace, begin, end) == (begin, end)


def test_span_trim_in_place() -> None:
    span = Span("--value--")
    result = span.trim(make_delimiter_predicate("-"))
    assert result is span
    assert (span.begin, span.end) == (2, 7)
    assert span.value() == "value"
    assert len(span) == 5
    assert span[0] == "v"
    assert "".join(span) == "value"
    with pytest.raises(IndexError):
        span[5]


def test_span_clamps_bounds() -> None:
    span = Span("abc", begin=5, end=10)
    assert (span.begin, span.end) == (3, 3)
    assert len(span.trim(is_whitespace)) == 0
