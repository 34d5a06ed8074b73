"""Static digit tables shared by the parser and the formatter."""

from __future__ import annotations

from numconv.exceptions import UnsupportedBaseError

SUPPORTED_BASES: tuple[int, ...] = (2, 8, 10, 16)

DIGIT_CHARS: str = "0123456789ABCDEF"
"""Display character for each digit value, indexed by value."""

HEX_DIGIT_VALUES: dict[str, int] = {
    **{char: value for value, char in enumerate("0123456789")},
    **{char: value for value, char in enumerate("ABCDEF", start=10)},
    **{char: value for value, char in enumerate("abcdef", start=10)},
}


def ensure_supported_base(base: int) -> None:
    """Raise :class:`UnsupportedBaseError` unless *base* is 2, 8, 10 or 16."""
    if base not in SUPPORTED_BASES:
        raise UnsupportedBaseError(
            f"Unsupported base: {base}",
            hint="Supported bases are "
            + ", ".join(str(b) for b in SUPPORTED_BASES)
            + ".",
        )


def digit_value(char: str, base: int) -> int | None:
    """Return the value of *char* in *base*, or ``None`` if it is not a digit.

    Hexadecimal goes through :data:`HEX_DIGIT_VALUES` (case-insensitive);
    the other bases use the offset from ``'0'``.
    """
    if base == 16:
        value = HEX_DIGIT_VALUES.get(char)
        if value is None:
            return None
    else:
        value = ord(char) - ord("0")

    if not 0 <= value < base:
        return None
    return value


def digit_char(value: int) -> str:
    """Return the display character for a digit value in ``0..15``."""
    if not 0 <= value < len(DIGIT_CHARS):
        raise ValueError(f"digit value out of range: {value}")
    return DIGIT_CHARS[value]


def legal_digits(base: int) -> str:
    """Describe the digits accepted by *base*, e.g. ``"0-7"``."""
    if base == 16:
        return "0-9 and A-F"
    return f"0-{base - 1}"
