"""CLI application entry point and command routing for mtg-card-search.

This module is the **process-level error boundary**.  Search and input
errors never reach it: the interactive loop reports them and carries on.
Only ``KeyboardInterrupt`` and truly unexpected exceptions end up here.
"""

from __future__ import annotations

import argparse
import sys

from mtg_card_search.cli import exit_codes
from mtg_card_search.cli.console import console
from mtg_card_search.cli.logging_config import configure_logging
from mtg_card_search.core.search_service import SearchService
from mtg_card_search.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="mtg-card-search",
        description=(
            "Interactively search Magic: The Gathering cards on Scryfall. "
            "Type 'exit' or 'quit' at the prompt to leave."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and decoding details to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service() -> SearchService:
    """Wire the Scryfall provider into a search service."""
    from mtg_card_search.infra.scryfall_provider import ScryfallSearchProvider

    return SearchService(ScryfallSearchProvider())


def _handle_interactive(service: SearchService) -> int:
    from mtg_card_search.cli.session import InteractiveSession

    return InteractiveSession(service).run()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the mtg-card-search CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    return _handle_interactive(_build_service())


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except KeyboardInterrupt:
        console.print()
        console.print("Aborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
