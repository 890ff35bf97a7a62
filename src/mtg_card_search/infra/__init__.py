"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Scryfall HTTP API.  Every raw
``requests`` exception is caught here and re-raised as a
:class:`~mtg_card_search.exceptions.CardSearchError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from mtg_card_search.infra.scryfall_provider import ScryfallSearchProvider

__all__: list[str] = ["ScryfallSearchProvider"]
