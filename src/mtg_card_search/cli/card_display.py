"""Text rendering of search results.

:func:`render_cards` is a pure function: the same cards always produce
the same text.  :func:`show_results` is the only function here that
prints.
"""

from __future__ import annotations

from collections.abc import Sequence

from mtg_card_search.cli.console import console
from mtg_card_search.core.models import Card, SearchResult

RULE_WIDTH: int = 80
HEAVY_RULE: str = "=" * RULE_WIDTH
LIGHT_RULE: str = "-" * RULE_WIDTH

NO_RESULTS_MESSAGE: str = "No cards found matching your search."
INDENT: str = "   "


# ---------------------------------------------------------------------------
# Presentation helpers (pure)
# ---------------------------------------------------------------------------

def _heading(index: int, card: Card) -> str:
    """Build ``"1. Lightning Bolt {R}"``; lands drop the mana cost entirely."""
    if card.mana_cost:
        return f"{index}. {card.name} {card.mana_cost}"
    return f"{index}. {card.name}"


def format_card_lines(index: int, card: Card) -> list[str]:
    """Return the lines describing *card*, numbered *index* (1-based)."""
    lines = [
        _heading(index, card),
        f"{INDENT}Type: {card.type_line}",
    ]
    if card.oracle_text:
        lines.append(f"{INDENT}Text: {card.oracle_text}")
    if card.has_power_toughness:
        lines.append(f"{INDENT}P/T: {card.power}/{card.toughness}")
    lines.append(f"{INDENT}Set: {card.set_name} ({card.rarity})")
    if card.colors:
        lines.append(f"{INDENT}Colors: {', '.join(card.colors)}")
    return lines


def render_cards(cards: Sequence[Card]) -> str:
    """Render the full listing for a non-empty sequence of cards."""
    lines = ["", f"Found {len(cards)} card(s):", HEAVY_RULE]
    last = len(cards) - 1
    for position, card in enumerate(cards):
        lines.append("")
        lines.extend(format_card_lines(position + 1, card))
        if position < last:
            lines.append(LIGHT_RULE)
    lines.append(HEAVY_RULE)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def show_results(result: SearchResult) -> None:
    """Print *result*, or the no-results notice when it is empty."""
    if not result:
        console.print(NO_RESULTS_MESSAGE, style="yellow")
        return

    console.print(render_cards(result.cards))
    if result.has_more:
        console.print(
            f"Showing the first {len(result)} of {result.total_cards} matches; "
            "refine your query to narrow them down.",
            style="dim",
        )
