"""
Error display for watchlens commands.

Every failure is shown the same way, one part per line:

    Error: <category>: <message>
       Expected: ...
       Got: ...
       Hint: ...

Only the first line is mandatory. Categories also decide the exit code.

Examples:
    >>> format_error("Not Found", "Could not find history/watch-history.html")
    'Error: Not Found: Could not find history/watch-history.html'
"""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from watchlens.exceptions import (
    EmptyWatchHistoryError,
    HistoryNotFoundError,
    InvalidArchiveError,
    WatchlensError,
)

console = Console()


class ErrorCategory:
    """
    Display categories for command failures.

    - NOT_FOUND: the archive lacks a required entry
    - VALIDATION: a path or option value was rejected
    - FORMAT: the entry exists but holds nothing recognizable
    - INTERNAL: anything unexpected
    """

    NOT_FOUND = "Not Found"
    VALIDATION = "Validation"
    FORMAT = "Format"
    INTERNAL = "Internal"


EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1
EXIT_SYSTEM_ERROR = 2

_EXIT_CODES: Dict[str, int] = {
    ErrorCategory.NOT_FOUND: EXIT_USER_ERROR,
    ErrorCategory.VALIDATION: EXIT_USER_ERROR,
    ErrorCategory.FORMAT: EXIT_USER_ERROR,
    ErrorCategory.INTERNAL: EXIT_SYSTEM_ERROR,
}


def get_exit_code_for_category(category: str) -> int:
    """
    Exit code for a category; unknown categories count as user errors.

    >>> get_exit_code_for_category(ErrorCategory.INTERNAL)
    2
    """
    return _EXIT_CODES.get(category, EXIT_USER_ERROR)


def get_category_for_error(error: WatchlensError) -> str:
    """Pick the display category for a watchlens exception."""
    if isinstance(error, HistoryNotFoundError):
        return ErrorCategory.NOT_FOUND
    if isinstance(error, InvalidArchiveError):
        return ErrorCategory.VALIDATION
    if isinstance(error, EmptyWatchHistoryError):
        return ErrorCategory.FORMAT
    return ErrorCategory.INTERNAL


def get_hint_for_error(error: WatchlensError) -> Optional[str]:
    """Actionable suggestion for the errors users can fix themselves."""
    if isinstance(error, HistoryNotFoundError):
        return (
            "Takeout splits large exports into several parts; "
            "try the part that contains 'history'."
        )
    if isinstance(error, EmptyWatchHistoryError):
        return "Export 'My Activity' in HTML format and try again."
    if isinstance(error, InvalidArchiveError):
        return "Pass the downloaded .zip or the folder it extracts to."
    return None


def format_error(
    category: str,
    message: str,
    expected: Optional[str] = None,
    got: Optional[str] = None,
    hint: Optional[str] = None,
) -> str:
    """
    Render an error as plain text.

    Parameters
    ----------
    category : str
        One of the ErrorCategory values.
    message : str
        What went wrong.
    expected, got, hint : Optional[str]
        Extra detail lines, each omitted when None.

    Returns
    -------
    str
        The error text, one part per line.
    """
    details = (("Expected", expected), ("Got", got), ("Hint", hint))
    lines = [f"Error: {category}: {message}"]
    lines.extend(f"   {label}: {value}" for label, value in details if value is not None)
    return "\n".join(lines)


def display_error_panel(
    category: str,
    message: str,
    expected: Optional[str] = None,
    got: Optional[str] = None,
    hint: Optional[str] = None,
    title: str = "Error",
) -> None:
    """Print an error inside a red panel."""
    text = format_error(category, message, expected=expected, got=got, hint=hint)
    console.print(Panel(f"[red]{text}[/red]", title=title, border_style="red"))


def display_watchlens_error(error: WatchlensError) -> int:
    """
    Show a watchlens exception and return the exit code to use.

    >>> try:
    ...     service.analyze(reader)
    ... except WatchlensError as e:
    ...     raise typer.Exit(display_watchlens_error(e))
    """
    category = get_category_for_error(error)
    display_error_panel(category, error.message, hint=get_hint_for_error(error))
    return get_exit_code_for_category(category)


def display_settings_error(error: ValidationError) -> int:
    """
    Show the first settings validation failure and return the exit code.

    Settings come from options, the environment and `.env`, so the
    offending field is named in the message.
    """
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg", error))
    display_error_panel(
        ErrorCategory.VALIDATION,
        f"{field}: {message}" if field else message,
        got=str(first.get("input")),
    )
    return get_exit_code_for_category(ErrorCategory.VALIDATION)


def display_success_panel(
    message: str,
    title: str = "Success",
    extra_info: Optional[str] = None,
) -> None:
    """Print a confirmation inside a green panel."""
    body = f"[green]{message}[/green]"
    if extra_info:
        body = f"{body}\n\n{extra_info}"
    console.print(Panel(body, title=title, border_style="green"))
