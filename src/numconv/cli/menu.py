"""Menu rendering for the interactive shell.

Renders a Rich table on stdout when Rich is installed and falls back to
the plain numbered list otherwise.  Rendering only; reading the choice
is the shell's job.
"""

from __future__ import annotations

from typing import Any

from numconv.cli.console import get_rich_console
from numconv.core.commands import COMMANDS, EXIT_CHOICE
from numconv.exceptions import EnvironmentError

MENU_TITLE: str = "Number System Converter"


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for menu rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def menu_lines() -> list[str]:
    """Return the plain-text menu, one entry per line."""
    lines = [MENU_TITLE, "-" * len(MENU_TITLE)]
    lines.extend(f"{cmd.choice}. {cmd.title}" for cmd in COMMANDS)
    lines.append(f"{EXIT_CHOICE}. Exit")
    return lines


def render_menu() -> None:
    """Print the menu of conversions to stdout."""
    try:
        table_class = _import_rich_table()
        rich_console = get_rich_console(stderr=False)
    except EnvironmentError:
        print()
        for line in menu_lines():
            print(line)
        return

    table = table_class(
        title=MENU_TITLE,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Conversion", justify="left", min_width=24)

    for cmd in COMMANDS:
        table.add_row(str(cmd.choice), cmd.title)
    table.add_row(str(EXIT_CHOICE), "Exit")

    rich_console.print()
    rich_console.print(table)
