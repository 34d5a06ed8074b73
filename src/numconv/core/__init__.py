"""Core layer — pure conversion logic.

Rules
-----
* No ``print()`` calls.
* No filesystem, terminal or network I/O.
* No imports from ``cli``.
"""

from numconv.core.commands import COMMANDS, EXIT_CHOICE, get_command, parse_choice
from numconv.core.dispatcher import convert, run_command
from numconv.core.models import (
    Base,
    ConversionCommand,
    ConversionResult,
    DecodeFailure,
    Decoded,
    DecodeResult,
    InvalidDigit,
)
from numconv.core.radix import from_decimal, to_decimal

__all__: list[str] = [
    "Base",
    "COMMANDS",
    "ConversionCommand",
    "ConversionResult",
    "DecodeFailure",
    "DecodeResult",
    "Decoded",
    "EXIT_CHOICE",
    "InvalidDigit",
    "convert",
    "from_decimal",
    "get_command",
    "parse_choice",
    "run_command",
    "to_decimal",
]
