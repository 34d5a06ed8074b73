"""Domain models for numconv.

All records are **frozen** dataclasses — immutable value objects that
live for a single conversion request and carry no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


# ---------------------------------------------------------------------------
# Bases
# ---------------------------------------------------------------------------

class Base(IntEnum):
    """The radixes the converter understands."""

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16

    @property
    def noun(self) -> str:
        """Lower-case name used in prompts (``"binary"``)."""
        return self.name.lower()


# ---------------------------------------------------------------------------
# Parser result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvalidDigit:
    """A character that does not map to a digit of *base*."""

    char: str
    """The offending character."""

    index: int
    """0-based offset of :attr:`char` in the input string."""

    base: int
    """The base the input was decoded against."""


@dataclass(frozen=True, slots=True)
class Decoded:
    """Successful decode of a digit-string."""

    value: int

    @property
    def ok(self) -> bool:
        """Always ``True``; the decode succeeded."""
        return True


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """Failed decode; no partial value is exposed."""

    error: InvalidDigit

    @property
    def ok(self) -> bool:
        """Always ``False``; see :attr:`error` for the rejected character."""
        return False


DecodeResult = Decoded | DecodeFailure


# ---------------------------------------------------------------------------
# Conversion commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConversionCommand:
    """One numbered entry of the conversion menu."""

    choice: int
    """Menu number the user types to select this command."""

    from_base: Base
    to_base: Base

    from_label: str
    """Input name used in ``"Enter <from_label> number: "``."""

    to_label: str
    """Output name used in ``"<to_label> equivalent: ..."``."""

    @property
    def title(self) -> str:
        """Menu title, e.g. ``"Binary to Decimal"``."""
        return f"{self.from_label.capitalize()} to {self.to_label}"


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of a successful conversion request."""

    command: ConversionCommand
    raw: str
    decimal: int
    output: str

    @property
    def line(self) -> str:
        """Result line, e.g. ``"Decimal equivalent: 10"``."""
        return f"{self.command.to_label} equivalent: {self.output}"
