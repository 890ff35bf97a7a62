"""Core / service layer — domain models and payload decoding.

Rules
-----
* No ``print()`` calls.
* No network I/O.
* No imports from ``cli`` or ``infra``.
"""

from mtg_card_search.core.models import Card, ImageUris, SearchResult
from mtg_card_search.core.protocols import SearchProvider
from mtg_card_search.core.search_service import SearchService

__all__: list[str] = [
    "Card",
    "ImageUris",
    "SearchProvider",
    "SearchResult",
    "SearchService",
]
