"""Tests for the static digit tables (core/digits.py)."""

from __future__ import annotations

import pytest

from numconv.core.digits import (
    DIGIT_CHARS,
    HEX_DIGIT_VALUES,
    SUPPORTED_BASES,
    digit_char,
    digit_value,
    ensure_supported_base,
    legal_digits,
)
from numconv.exceptions import UnsupportedBaseError


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

class TestTables:
    def test_supported_bases(self) -> None:
        assert SUPPORTED_BASES == (2, 8, 10, 16)

    def test_hex_table_has_22_entries(self) -> None:
        assert len(HEX_DIGIT_VALUES) == 22

    def test_hex_table_is_case_insensitive(self) -> None:
        for upper, lower in zip("ABCDEF", "abcdef"):
            assert HEX_DIGIT_VALUES[upper] == HEX_DIGIT_VALUES[lower]

    def test_hex_letters(self) -> None:
        assert HEX_DIGIT_VALUES["A"] == 10
        assert HEX_DIGIT_VALUES["f"] == 15

    def test_digit_chars_are_upper_case(self) -> None:
        assert DIGIT_CHARS == "0123456789ABCDEF"


# ---------------------------------------------------------------------------
# digit_value
# ---------------------------------------------------------------------------

class TestDigitValue:
    @pytest.mark.parametrize(
        ("char", "base", "expected"),
        [
            ("0", 2, 0),
            ("1", 2, 1),
            ("7", 8, 7),
            ("9", 10, 9),
            ("a", 16, 10),
            ("F", 16, 15),
        ],
    )
    def test_valid(self, char: str, base: int, expected: int) -> None:
        assert digit_value(char, base) == expected

    @pytest.mark.parametrize(
        ("char", "base"),
        [
            ("2", 2),
            ("8", 8),
            ("A", 10),
            ("G", 16),
            ("/", 10),  # one below '0'
            (" ", 2),
        ],
    )
    def test_invalid(self, char: str, base: int) -> None:
        assert digit_value(char, base) is None


# ---------------------------------------------------------------------------
# digit_char / legal_digits / ensure_supported_base
# ---------------------------------------------------------------------------

class TestDigitChar:
    def test_decimal_digit(self) -> None:
        assert digit_char(7) == "7"

    def test_hex_letter(self) -> None:
        assert digit_char(11) == "B"

    @pytest.mark.parametrize("value", [-1, 16])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(ValueError):
            digit_char(value)


class TestLegalDigits:
    def test_binary(self) -> None:
        assert legal_digits(2) == "0-1"

    def test_hexadecimal(self) -> None:
        assert legal_digits(16) == "0-9 and A-F"


class TestEnsureSupportedBase:
    @pytest.mark.parametrize("base", [2, 8, 10, 16])
    def test_accepts(self, base: int) -> None:
        ensure_supported_base(base)

    @pytest.mark.parametrize("base", [0, 1, 3, 36])
    def test_rejects(self, base: int) -> None:
        with pytest.raises(UnsupportedBaseError) as exc_info:
            ensure_supported_base(base)
        assert exc_info.value.hint is not None
