"""Process exit codes returned by :func:`numconv.cli.app.main`."""

from __future__ import annotations

SUCCESS: int = 0
"""The shell was exited with choice 0, or a one-shot command succeeded."""

GENERAL_ERROR: int = 1
"""A NumconvError reached the error boundary and was rendered."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C (128 + SIGINT)."""
