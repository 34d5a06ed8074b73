"""Custom exception hierarchy for numconv.

Every user-visible error condition inherits from :class:`NumconvError`
so the CLI layer can render it as a clean message instead of a stack
trace.

Hierarchy
---------
NumconvError
├── InvalidDigitError
├── InvalidMenuChoiceError
├── CommandSelectionError
├── UnsupportedBaseError
├── NegativeValueError
└── EnvironmentError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numconv.core.models import InvalidDigit


class NumconvError(Exception):
    """Base exception for all numconv errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Conversion ------------------------------------------------------------

class InvalidDigitError(NumconvError):
    """Raised when an input character is not a digit of the stated base."""

    def __init__(
        self,
        message: str,
        invalid: InvalidDigit,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.invalid: InvalidDigit = invalid


class UnsupportedBaseError(NumconvError):
    """Raised when a base outside 2/8/10/16 reaches the core."""


class NegativeValueError(NumconvError):
    """Raised when a negative value is handed to the formatter."""


# --- Menu handling ---------------------------------------------------------

class InvalidMenuChoiceError(NumconvError):
    """Raised when a menu selection names no known command."""

    def __init__(self, raw: str, *, hint: str | None = None) -> None:
        super().__init__(f"Invalid choice: {raw!r}", hint=hint)
        self.raw: str = raw


class CommandSelectionError(NumconvError):
    """Raised when the arrow-key command prompt is cancelled."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(NumconvError):
    """Raised when an optional runtime dependency is not available."""
