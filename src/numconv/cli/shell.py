"""The numbered interactive shell.

Loop: menu → choice → digit-string → result, until choice 0 or end of
input.  Invalid choices and invalid digits are reported and the loop
carries on; neither ends the session.
"""

from __future__ import annotations

from numconv.cli import exit_codes
from numconv.cli.console import print_error
from numconv.cli.menu import render_menu
from numconv.cli.prompt import TokenReader
from numconv.core.commands import EXIT_CHOICE, get_command, parse_choice
from numconv.core.dispatcher import run_command
from numconv.core.models import ConversionCommand
from numconv.exceptions import InvalidDigitError, InvalidMenuChoiceError

CHOICE_PROMPT: str = "Enter your choice: "
INVALID_CHOICE_MESSAGE: str = "Invalid choice. Please try again."
EXIT_MESSAGE: str = "Exiting program."


def number_prompt(command: ConversionCommand) -> str:
    return f"Enter {command.from_label} number: "


def handle_conversion(command: ConversionCommand, raw: str) -> bool:
    """Convert *raw* and print the result line.

    Returns ``False`` (and prints only the error) when *raw* holds an
    invalid digit.
    """
    try:
        result = run_command(command, raw)
    except InvalidDigitError as exc:
        print_error(exc)
        return False
    print(result.line)
    return True


def _exit() -> int:
    print(EXIT_MESSAGE)
    return exit_codes.SUCCESS


def run_shell(reader: TokenReader | None = None) -> int:
    """Run the numbered menu loop until the user exits.

    End of input at either prompt counts as choosing Exit.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`.
    """
    reader = reader or TokenReader()

    while True:
        render_menu()
        raw_choice = reader.read_token(CHOICE_PROMPT)
        if raw_choice is None:
            print()
            return _exit()

        try:
            choice = parse_choice(raw_choice)
            if choice == EXIT_CHOICE:
                return _exit()
            command = get_command(choice)
        except InvalidMenuChoiceError:
            print(INVALID_CHOICE_MESSAGE)
            continue

        raw = reader.read_token(number_prompt(command))
        if raw is None:
            print()
            return _exit()
        handle_conversion(command, raw)
