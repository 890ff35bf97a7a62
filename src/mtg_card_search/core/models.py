"""Domain models for mtg-card-search.

All models are **frozen** dataclasses: immutable value objects created
fresh for every search and discarded once rendered.  They carry no I/O
and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Image URIs
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ImageUris:
    """Image links attached to a card.  Carried, never fetched."""

    small: str | None = None
    normal: str | None = None
    large: str | None = None
    png: str | None = None
    art_crop: str | None = None
    border_crop: str | None = None


# ---------------------------------------------------------------------------
# Card
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Card:
    """A single search hit as returned by the Scryfall API."""

    name: str
    """Card name (e.g. ``Lightning Bolt``)."""

    mana_cost: str = ""
    """Mana cost in brace notation (e.g. ``{R}``).  Empty for lands."""

    type_line: str = ""

    oracle_text: str = ""
    """Rules text.  Empty for vanilla cards."""

    power: str = ""
    """Power as a string (``*`` and ``1+*`` are legal).  Empty for non-creatures."""

    toughness: str = ""

    colors: tuple[str, ...] = ()
    """Color codes (``W``, ``U``, ``B``, ``R``, ``G``) in API order.  Empty for colorless."""

    set_name: str = ""

    rarity: str = ""

    image_uris: ImageUris = field(default_factory=ImageUris)

    @property
    def has_power_toughness(self) -> bool:
        return bool(self.power) and bool(self.toughness)


# ---------------------------------------------------------------------------
# Search result wrapper
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SearchResult:
    """One page of search results, in the order the API returned them.

    ``total_cards`` is the count reported by the API and may exceed
    ``len(cards)`` when ``has_more`` is set; further pages are never
    requested.
    """

    cards: tuple[Card, ...]
    total_cards: int = 0
    object: str = "list"
    has_more: bool = False
    next_page: str | None = None

    def __len__(self) -> int:
        return len(self.cards)

    def __bool__(self) -> bool:
        return len(self.cards) > 0
