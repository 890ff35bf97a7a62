"""mtg-card-search — interactive Magic: The Gathering card lookup.

A thin terminal client over the Scryfall card-search API.
"""

from mtg_card_search.version import __version__

__all__: list[str] = ["__version__"]
