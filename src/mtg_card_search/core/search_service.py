"""Core search service — turns a query into a :class:`SearchResult`.

The service depends on a :class:`~mtg_card_search.core.protocols.SearchProvider`
injected at construction time and owns everything between the raw JSON
payload and the domain models: query validation, shape checking,
decoding, and the self-imposed delay after each successful call.

Guarantees
----------
* No network access and no ``print()``.
* Only :class:`~mtg_card_search.exceptions.CardSearchError` subclasses escape.
* Unknown payload fields are ignored.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from mtg_card_search.core.models import Card, ImageUris, SearchResult
from mtg_card_search.core.protocols import SearchProvider
from mtg_card_search.exceptions import (
    CardSearchError,
    DecodeError,
    InvalidQueryError,
    NetworkError,
)

logger = logging.getLogger(__name__)

DEFAULT_DELAY: float = 0.1
"""Seconds to pause after every successful search."""

_FACE_SEPARATOR = "\n---\n"

_IMAGE_FIELDS: tuple[str, ...] = (
    "small",
    "normal",
    "large",
    "png",
    "art_crop",
    "border_crop",
)


class SearchService:
    """Stateless search orchestrator.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`SearchProvider` protocol.
    delay:
        Seconds to wait after a successful call before returning.
    sleep:
        Blocking sleep function; injectable for tests.
    """

    def __init__(
        self,
        provider: SearchProvider,
        *,
        delay: float = DEFAULT_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._provider: SearchProvider = provider
        self._delay: float = delay
        self._sleep: Callable[[float], None] = sleep

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def search(self, query: str) -> SearchResult:
        """Search for cards matching *query*.

        The query is passed through to the API untouched apart from
        surrounding whitespace.

        Raises
        ------
        InvalidQueryError
            If *query* is empty after trimming.
        NetworkError, RateLimitedError, ApiError, ResponseIOError
            Propagated from the provider.
        DecodeError
            If the payload is not shaped like a search result.
        """
        stripped = query.strip()
        if not stripped:
            raise InvalidQueryError("Search query must not be empty.")

        payload = self._fetch(stripped)
        result = self.parse_search_result(payload)
        logger.debug(
            "query %r decoded %d card(s) of %d total",
            stripped,
            len(result),
            result.total_cards,
        )

        if self._delay > 0:
            logger.debug("sleeping %.3fs after search", self._delay)
            self._sleep(self._delay)

        return result

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self, query: str) -> Any:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return self._provider.search(query)
        except CardSearchError:
            raise
        except Exception as exc:
            raise NetworkError(f"Unexpected provider error: {exc}") from exc

    # ------------------------------------------------------------------
    # Raw JSON → domain-model parsers (pure)
    # ------------------------------------------------------------------

    @classmethod
    def parse_search_result(cls, payload: Any) -> SearchResult:
        """Convert a decoded search payload into a :class:`SearchResult`."""
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(payload).__name__}.",
            )

        raw_cards = payload.get("data")
        if raw_cards is None:
            raw_cards = []
        if not isinstance(raw_cards, list):
            raise DecodeError("Field 'data' must be a list of cards.")

        cards = tuple(cls.parse_card(entry) for entry in raw_cards)

        total = payload.get("total_cards", 0)
        if total is None:
            total = 0
        if isinstance(total, bool) or not isinstance(total, int):
            raise DecodeError("Field 'total_cards' must be an integer.")

        has_more = payload.get("has_more", False)
        if has_more is None:
            has_more = False
        if not isinstance(has_more, bool):
            raise DecodeError("Field 'has_more' must be a boolean.")

        next_page = payload.get("next_page")
        if next_page is not None and not isinstance(next_page, str):
            raise DecodeError("Field 'next_page' must be a string.")

        return SearchResult(
            cards=cards,
            total_cards=total,
            object=_string_field(payload, "object") or "list",
            has_more=has_more,
            next_page=next_page,
        )

    @classmethod
    def parse_card(cls, raw: Any) -> Card:
        """Convert one raw card object into a :class:`Card`.

        Multi-faced cards keep their rules text and mana cost on
        ``card_faces`` instead of the top level; those are folded in.
        """
        if not isinstance(raw, dict):
            raise DecodeError(
                f"Expected a card object, got {type(raw).__name__}.",
            )

        oracle_text = _string_field(raw, "oracle_text")
        mana_cost = _string_field(raw, "mana_cost")
        colors = _colors_field(raw)

        faces = cls._card_faces(raw)
        if faces:
            if not oracle_text:
                face_texts = [_string_field(face, "oracle_text") for face in faces]
                oracle_text = _FACE_SEPARATOR.join(text for text in face_texts if text)
            if not mana_cost:
                mana_cost = _string_field(faces[0], "mana_cost")
            if not colors and "colors" not in raw:
                seen: dict[str, None] = {}
                for face in faces:
                    seen.update(dict.fromkeys(_colors_field(face)))
                colors = tuple(seen)

        return Card(
            name=_string_field(raw, "name"),
            mana_cost=mana_cost,
            type_line=_string_field(raw, "type_line"),
            oracle_text=oracle_text,
            power=_string_field(raw, "power"),
            toughness=_string_field(raw, "toughness"),
            colors=colors,
            set_name=_string_field(raw, "set_name"),
            rarity=_string_field(raw, "rarity"),
            image_uris=cls.parse_image_uris(raw.get("image_uris")),
        )

    @staticmethod
    def parse_image_uris(raw: Any) -> ImageUris:
        """Convert the optional ``image_uris`` object into :class:`ImageUris`."""
        if raw is None:
            return ImageUris()
        if not isinstance(raw, dict):
            raise DecodeError("Field 'image_uris' must be an object.")
        return ImageUris(**{
            name: _string_field(raw, name) or None for name in _IMAGE_FIELDS
        })

    @staticmethod
    def _card_faces(raw: dict[str, Any]) -> list[dict[str, Any]]:
        faces: object = raw.get("card_faces")
        if faces is None:
            return []
        if not isinstance(faces, list) or not all(isinstance(f, dict) for f in faces):
            raise DecodeError("Field 'card_faces' must be a list of objects.")
        return faces


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _string_field(raw: dict[str, Any], key: str) -> str:
    """Return ``raw[key]`` as a string; missing or null becomes ``""``."""
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(
            f"Field '{key}' must be a string, got {type(value).__name__}.",
        )
    return value


def _colors_field(raw: dict[str, Any]) -> tuple[str, ...]:
    value = raw.get("colors")
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(c, str) for c in value):
        raise DecodeError("Field 'colors' must be a list of strings.")
    return tuple(value)
