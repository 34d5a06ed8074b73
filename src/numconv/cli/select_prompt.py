"""Arrow-key conversion picker (``numconv --select``).

Same loop as :mod:`numconv.cli.shell`, but the conversion is chosen with
a questionary selector and the number is typed into a questionary text
prompt.  questionary is imported lazily so the rest of the CLI works
without it.
"""

from __future__ import annotations

from typing import Any

from numconv.cli import exit_codes
from numconv.cli.shell import EXIT_MESSAGE, handle_conversion
from numconv.core.commands import COMMANDS, EXIT_CHOICE, get_command
from numconv.core.models import ConversionCommand
from numconv.exceptions import CommandSelectionError, EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _build_choice_label(command: ConversionCommand) -> str:
    """Label shown in the selector, e.g. ``" 1.  Binary to Decimal"``."""
    return f"{command.choice:>2}.  {command.title}"


def prompt_command_selection() -> int:
    """Ask the user to pick a conversion and return its menu number.

    Raises
    ------
    CommandSelectionError
        If the prompt is cancelled (Esc / Ctrl+C).
    """
    questionary = _import_questionary()

    choices = [
        questionary.Choice(title=_build_choice_label(cmd), value=cmd.choice)
        for cmd in COMMANDS
    ]
    choices.append(
        questionary.Choice(title=f"{EXIT_CHOICE:>2}.  Exit", value=EXIT_CHOICE),
    )

    selected: int | None = questionary.select(
        "Select a conversion:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # None on Ctrl+C / Esc

    if selected is None:
        raise CommandSelectionError(
            "No conversion selected.",
            hint="Use arrow keys to pick a conversion, then press Enter.",
        )
    return selected


def prompt_number(command: ConversionCommand) -> str | None:
    """Ask for the digit-string; ``None`` when the prompt is cancelled.

    Only the first whitespace-delimited token is kept.
    """
    questionary = _import_questionary()
    answer: str | None = questionary.text(
        f"Enter {command.from_label} number:",
    ).ask()
    if answer is None:
        return None
    tokens = answer.split()
    return tokens[0] if tokens else ""


def run_select_shell() -> int:
    """Run the arrow-key loop until Exit is chosen.

    A cancelled number prompt returns to the conversion picker.
    """
    while True:
        choice = prompt_command_selection()
        if choice == EXIT_CHOICE:
            print(EXIT_MESSAGE)
            return exit_codes.SUCCESS

        command = get_command(choice)
        raw = prompt_number(command)
        if raw is None:
            continue
        handle_conversion(command, raw)
