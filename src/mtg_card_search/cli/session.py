"""The interactive search loop.

States
------
prompt → read a line →
  * blank line            → prompt again
  * ``exit`` / ``quit``   → terminate (exit code 0)
  * anything else         → search → render / notice / error → prompt again

A failed search or a failed read never ends the session.  End of input
(a closed stream) does, since no further line can ever arrive.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from mtg_card_search.cli import exit_codes
from mtg_card_search.cli.card_display import HEAVY_RULE, show_results
from mtg_card_search.cli.console import console
from mtg_card_search.core.search_service import SearchService
from mtg_card_search.exceptions import CardSearchError, InputReadError

logger = logging.getLogger(__name__)

TITLE: str = "MTG Card Search"
PROMPT: str = "\nSearch for a card: "
EXIT_COMMANDS: frozenset[str] = frozenset({"exit", "quit"})


def is_exit_command(text: str) -> bool:
    """Return ``True`` for any casing of ``exit`` or ``quit``."""
    return text.strip().lower() in EXIT_COMMANDS


def print_error(prefix: str, exc: CardSearchError) -> None:
    """Print ``"<prefix>: <message>"`` and the hint, if any."""
    console.print(f"{prefix}: {exc}", style="bold red")
    if exc.hint:
        console.print(f"Hint: {exc.hint}", style="yellow")


class InteractiveSession:
    """Read queries line by line and print results until told to stop.

    Parameters
    ----------
    service:
        The search service queries are dispatched to.
    stdin:
        Stream to read queries from.  ``None`` means ``sys.stdin`` at the
        time :meth:`run` is called.
    """

    def __init__(self, service: SearchService, *, stdin: TextIO | None = None) -> None:
        self._service = service
        self._stdin = stdin

    def run(self) -> int:
        """Run the loop and return the process exit code."""
        self._print_banner()

        while True:
            console.print(PROMPT, end="")

            try:
                line = self._read_line()
            except InputReadError as exc:
                print_error("Error reading input", exc)
                continue

            if line is None:
                console.print()
                console.print("Input closed.")
                console.print("Goodbye!")
                return exit_codes.SUCCESS

            query = line.strip()
            if not query:
                continue

            if is_exit_command(query):
                console.print("Goodbye!")
                return exit_codes.SUCCESS

            self.handle_query(query)

    def handle_query(self, query: str) -> None:
        """Search for *query* and print the outcome; errors are reported, not raised."""
        logger.debug("dispatching query %r", query)
        try:
            result = self._service.search(query)
        except CardSearchError as exc:
            logger.debug("search failed: %s", type(exc).__name__)
            print_error("Error searching cards", exc)
            return
        show_results(result)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _print_banner() -> None:
        console.print(TITLE, style="bold")
        console.print("Type 'exit' or 'quit' to close the application")
        console.print(HEAVY_RULE)

    def _read_line(self) -> str | None:
        """Return the next raw line, or ``None`` at end of input."""
        stream = self._stdin if self._stdin is not None else sys.stdin
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError(str(exc)) from exc
        if line == "":
            return None
        return line
