"""The fixed table of menu conversions.

Only these twelve ordered pairs are offered; the table is looked up by
menu number instead of branching on it.
"""

from __future__ import annotations

import re

from numconv.core.models import Base, ConversionCommand
from numconv.exceptions import InvalidMenuChoiceError

EXIT_CHOICE: int = 0
"""Menu number that leaves the interactive loop."""


def _command(choice: int, from_base: Base, to_base: Base) -> ConversionCommand:
    return ConversionCommand(
        choice=choice,
        from_base=from_base,
        to_base=to_base,
        from_label=from_base.noun,
        to_label=to_base.noun.capitalize(),
    )


COMMANDS: tuple[ConversionCommand, ...] = (
    _command(1, Base.BINARY, Base.DECIMAL),
    _command(2, Base.DECIMAL, Base.BINARY),
    _command(3, Base.OCTAL, Base.DECIMAL),
    _command(4, Base.DECIMAL, Base.OCTAL),
    _command(5, Base.HEXADECIMAL, Base.DECIMAL),
    _command(6, Base.DECIMAL, Base.HEXADECIMAL),
    _command(7, Base.BINARY, Base.OCTAL),
    _command(8, Base.OCTAL, Base.BINARY),
    _command(9, Base.BINARY, Base.HEXADECIMAL),
    _command(10, Base.HEXADECIMAL, Base.BINARY),
    _command(11, Base.OCTAL, Base.HEXADECIMAL),
    _command(12, Base.HEXADECIMAL, Base.OCTAL),
)

_BY_CHOICE: dict[int, ConversionCommand] = {cmd.choice: cmd for cmd in COMMANDS}

_CHOICE_PATTERN = re.compile(r"-?[0-9]+")
_CHOICE_HINT = f"Pick a number between {EXIT_CHOICE} and {len(COMMANDS)}."


def get_command(choice: int) -> ConversionCommand:
    """Return the command registered under *choice*.

    Raises
    ------
    InvalidMenuChoiceError
        If no command has that number (``EXIT_CHOICE`` included).
    """
    try:
        return _BY_CHOICE[choice]
    except KeyError:
        raise InvalidMenuChoiceError(str(choice), hint=_CHOICE_HINT) from None


def parse_choice(raw: str) -> int:
    """Parse a menu token into an integer choice.

    Raises
    ------
    InvalidMenuChoiceError
        If *raw* is not a plain ASCII integer (optional leading ``-``).
    """
    token = raw.strip()
    if not _CHOICE_PATTERN.fullmatch(token):
        raise InvalidMenuChoiceError(raw, hint=_CHOICE_HINT)
    return int(token)
