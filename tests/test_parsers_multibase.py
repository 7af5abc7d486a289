import numpy as np
import pytest

from textscan.parsers import detect_base, string_to_number_multibase


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0o675", 0o675),
        ("089", 89),
        ("007", 7),
        ("-0x567.8", -0x568),
        ("0x567.7", 0x567),
        ("0b11011", 0b11011),
        ("0B101", 5),
        ("0XfF", 255),
        ("0O17", 15),
        ("-0b1", -1),
        ("0", 0),
        ("-2147483648", -2147483648),
        ("-0x80000000", -2147483648),
    ],
)
def test_multibase_values(raw: str, expected: int) -> None:
    outcome = string_to_number_multibase(raw, np.int32)
    assert outcome.ok, raw
    assert outcome.value == expected


@pytest.mark.parametrize(
    "raw",
    ["0x", "-0x", "0b", "0o", "0b102", "0o8", "0x80000000", "-", "", "0x-5", "--5", "0xg"],
)
def test_multibase_failures(raw: str) -> None:
    assert not string_to_number_multibase(raw, np.int32)


def test_multibase_float_target() -> None:
    outcome = string_to_number_multibase("0x1.8", np.float64)
    assert outcome.value == pytest.approx(1.5)


def test_multibase_wide_and_bytes() -> None:
    assert string_to_number_multibase(b"0o675", np.int32).value == 0o675
    assert string_to_number_multibase([ord(ch) for ch in "-0x10"], np.int32).value == -16


@pytest.mark.parametrize(
    "raw, expected",
    [("0x1", (16, 2)), ("0o1", (8, 2)), ("0b1", (2, 2)), ("089", (10, 0)), ("x1", (10, 0)), ("0", (10, 0))],
)
def test_detect_base(raw: str, expected) -> None:
    assert detect_base(raw) == expected
