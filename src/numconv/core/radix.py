"""Parser and formatter — the two pure base-conversion primitives.

Every conversion goes through a decimal (plain ``int``) intermediate:

* :func:`to_decimal` decodes a digit-string in a given base.
* :func:`from_decimal` encodes a non-negative ``int`` in a given base.

Neither function performs I/O.  A bad digit is reported through the
returned :class:`~numconv.core.models.DecodeFailure`, never through a
magic value.
"""

from __future__ import annotations

from numconv.core.digits import digit_char, digit_value, ensure_supported_base
from numconv.core.models import DecodeFailure, Decoded, DecodeResult, InvalidDigit
from numconv.exceptions import NegativeValueError


# ---------------------------------------------------------------------------
# Parser (string -> decimal)
# ---------------------------------------------------------------------------

def to_decimal(digits: str, base: int) -> DecodeResult:
    """Decode *digits* written in *base*.

    Characters are consumed from the least-significant (rightmost) end,
    so when several characters are invalid the rightmost one is the one
    reported.  An empty string decodes to ``0``.

    Raises
    ------
    UnsupportedBaseError
        If *base* is not one of 2, 8, 10 or 16.
    """
    ensure_supported_base(base)

    decimal = 0
    power = 1
    last = len(digits) - 1
    for position, char in enumerate(reversed(digits)):
        value = digit_value(char, base)
        if value is None:
            return DecodeFailure(
                InvalidDigit(char=char, index=last - position, base=base),
            )
        decimal += value * power
        power *= base
    return Decoded(decimal)


# ---------------------------------------------------------------------------
# Formatter (decimal -> string)
# ---------------------------------------------------------------------------

def from_decimal(value: int, base: int) -> str:
    """Encode a non-negative *value* in *base* (upper-case hex digits).

    Raises
    ------
    UnsupportedBaseError
        If *base* is not one of 2, 8, 10 or 16.
    NegativeValueError
        If *value* is negative.
    """
    ensure_supported_base(base)
    if value < 0:
        raise NegativeValueError(f"Cannot format negative value {value}")
    if value == 0:
        return "0"

    chars: list[str] = []
    while value > 0:
        value, remainder = divmod(value, base)
        chars.append(digit_char(remainder))
    # Produced least-significant first.
    chars.reverse()
    return "".join(chars)
