"""Allow ``python -m mtg_card_search`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m mtg_card_search`` behaves identically to the
``mtg-card-search`` console script.
"""

from __future__ import annotations

from mtg_card_search.cli.app import cli

if __name__ == "__main__":
    cli()
