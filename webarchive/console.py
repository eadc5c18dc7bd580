"""Console APIs."""

from __future__ import annotations

import rich.console

from .result import Result

CONSOLE = rich.console.Console()
ERROR_CONSOLE = rich.console.Console(stderr=True)


def display_urls(result: Result) -> None:
    """Prints one URL per line."""
    for url in result:
        CONSOLE.print(
            str(url), markup=False, emoji=False, highlight=False, soft_wrap=True
        )


def display_json(result: Result) -> None:
    """Prints the result as a JSON document.

    :raises SerializationError: the result could not be encoded
    """
    CONSOLE.print(
        result.format_as_json(),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def display_error(message: str) -> None:
    """Prints an error message to stderr."""
    ERROR_CONSOLE.print(f"error: {message}", markup=False, emoji=False, soft_wrap=True)
