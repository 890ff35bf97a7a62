"""Tests for result rendering (cli/card_display.py)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from factories import make_card
from mtg_card_search.cli.card_display import (
    HEAVY_RULE,
    LIGHT_RULE,
    NO_RESULTS_MESSAGE,
    format_card_lines,
    render_cards,
    show_results,
)
from mtg_card_search.core.models import SearchResult


# ---------------------------------------------------------------------------
# Single card
# ---------------------------------------------------------------------------

class TestFormatCardLines:
    def test_lightning_bolt(self) -> None:
        assert format_card_lines(1, make_card()) == [
            "1. Lightning Bolt {R}",
            "   Type: Instant",
            "   Text: Deal 3 damage to any target.",
            "   Set: Limited Edition Alpha (common)",
            "   Colors: R",
        ]

    def test_creature_has_power_toughness(self) -> None:
        card = make_card(name="Grizzly Bears", mana_cost="{1}{G}", power="2", toughness="2",
                         colors=("G",), oracle_text="")
        lines = format_card_lines(3, card)
        assert lines[0] == "3. Grizzly Bears {1}{G}"
        assert "   P/T: 2/2" in lines

    def test_no_text_line_when_oracle_empty(self) -> None:
        lines = format_card_lines(1, make_card(oracle_text=""))
        assert not any(line.strip().startswith("Text:") for line in lines)

    @pytest.mark.parametrize(("power", "toughness"), [("", "2"), ("2", ""), ("", "")])
    def test_no_pt_line_unless_both_present(self, power: str, toughness: str) -> None:
        lines = format_card_lines(1, make_card(power=power, toughness=toughness))
        assert not any("P/T:" in line for line in lines)

    def test_no_colors_line_when_colorless(self) -> None:
        lines = format_card_lines(1, make_card(name="Sol Ring", colors=()))
        assert not any("Colors:" in line for line in lines)

    def test_multiple_colors_joined(self) -> None:
        lines = format_card_lines(1, make_card(colors=("W", "U", "B")))
        assert "   Colors: W, U, B" in lines

    def test_empty_mana_cost_has_no_trailing_space(self) -> None:
        assert format_card_lines(7, make_card(name="Forest", mana_cost=""))[0] == "7. Forest"

    def test_set_line_always_present(self) -> None:
        lines = format_card_lines(1, make_card(set_name="", rarity=""))
        assert "   Set:  ()" in lines


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------

class TestRenderCards:
    def test_scenario_single_card(self) -> None:
        assert render_cards([make_card()]) == "\n".join([
            "",
            "Found 1 card(s):",
            HEAVY_RULE,
            "",
            "1. Lightning Bolt {R}",
            "   Type: Instant",
            "   Text: Deal 3 damage to any target.",
            "   Set: Limited Edition Alpha (common)",
            "   Colors: R",
            HEAVY_RULE,
        ])

    def test_rules_are_80_wide(self) -> None:
        assert HEAVY_RULE == "=" * 80
        assert LIGHT_RULE == "-" * 80

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_separator_between_cards_only(self, count: int) -> None:
        cards = [make_card(name=f"Card {i}") for i in range(count)]
        lines = render_cards(cards).split("\n")
        assert lines.count(LIGHT_RULE) == count - 1
        assert lines[-1] == HEAVY_RULE
        assert lines[-2] != LIGHT_RULE

    def test_indices_are_one_based_in_order(self) -> None:
        cards = [make_card(name="Abrade"), make_card(name="Shock")]
        text = render_cards(cards)
        assert "1. Abrade {R}" in text
        assert "2. Shock {R}" in text
        assert text.index("1. Abrade") < text.index("2. Shock")

    def test_header_counts_cards(self) -> None:
        text = render_cards([make_card(), make_card(), make_card()])
        assert "Found 3 card(s):" in text

    def test_rendering_is_repeatable(self) -> None:
        cards = [make_card(), make_card(name="Shock", oracle_text="")]
        assert render_cards(cards) == render_cards(cards)


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------

class TestShowResults:
    def test_prints_listing(self, capsys: pytest.CaptureFixture[str]) -> None:
        show_results(SearchResult(cards=(make_card(),), total_cards=1))
        out = capsys.readouterr().out
        assert "Found 1 card(s):" in out
        assert "1. Lightning Bolt {R}" in out

    def test_brackets_printed_literally(self, capsys: pytest.CaptureFixture[str]) -> None:
        card = make_card(name="Jace Beleren", oracle_text="[+2]: Each player draws a card.")
        show_results(SearchResult(cards=(card,), total_cards=1))
        assert "   Text: [+2]: Each player draws a card." in capsys.readouterr().out

    def test_long_text_not_wrapped(self, capsys: pytest.CaptureFixture[str]) -> None:
        text = "Flying. " * 20
        show_results(SearchResult(cards=(make_card(oracle_text=text.strip()),), total_cards=1))
        assert f"   Text: {text.strip()}" in capsys.readouterr().out

    def test_empty_result_prints_notice_without_rendering(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("mtg_card_search.cli.card_display.render_cards") as mock_render:
            show_results(SearchResult(cards=()))
        mock_render.assert_not_called()
        assert NO_RESULTS_MESSAGE in capsys.readouterr().out

    def test_more_results_note(self, capsys: pytest.CaptureFixture[str]) -> None:
        show_results(SearchResult(cards=(make_card(),), total_cards=300, has_more=True))
        assert "first 1 of 300" in capsys.readouterr().out

    def test_no_note_for_single_page(self, capsys: pytest.CaptureFixture[str]) -> None:
        show_results(SearchResult(cards=(make_card(),), total_cards=1))
        assert "refine your query" not in capsys.readouterr().out
