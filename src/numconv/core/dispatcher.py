"""Dispatcher — composes the parser and formatter for one request.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* A failed decode never reaches the formatter; it surfaces as
  :class:`~numconv.exceptions.InvalidDigitError` and no result exists.
"""

from __future__ import annotations

from numconv.core.digits import legal_digits
from numconv.core.models import (
    Base,
    ConversionCommand,
    ConversionResult,
    DecodeFailure,
    InvalidDigit,
)
from numconv.core.radix import from_decimal, to_decimal
from numconv.exceptions import InvalidDigitError


def describe_invalid_digit(error: InvalidDigit) -> str:
    """Render the user-facing message for a rejected character."""
    if error.base == 16:
        return f"Invalid hexadecimal digit '{error.char}'"
    return f"Invalid digit '{error.char}' for base {error.base}"


def _invalid_digit_error(error: InvalidDigit) -> InvalidDigitError:
    name = Base(error.base).noun
    return InvalidDigitError(
        describe_invalid_digit(error),
        error,
        hint=f"{name.capitalize()} numbers use only the digits "
        f"{legal_digits(error.base)}.",
    )


def decode(raw: str, from_base: int) -> int:
    """Decode *raw* or raise :class:`InvalidDigitError`."""
    result = to_decimal(raw, from_base)
    if isinstance(result, DecodeFailure):
        raise _invalid_digit_error(result.error)
    return result.value


def convert(raw: str, from_base: int, to_base: int) -> str:
    """Convert *raw* from *from_base* to *to_base* via decimal.

    Raises
    ------
    InvalidDigitError
        If *raw* contains a character that is not a digit of *from_base*.
    UnsupportedBaseError
        If either base is not one of 2, 8, 10 or 16.
    """
    return from_decimal(decode(raw, from_base), to_base)


def run_command(command: ConversionCommand, raw: str) -> ConversionResult:
    """Run one menu command against the user's digit-string."""
    decimal = decode(raw, command.from_base)
    return ConversionResult(
        command=command,
        raw=raw,
        decimal=decimal,
        output=from_decimal(decimal, command.to_base),
    )
