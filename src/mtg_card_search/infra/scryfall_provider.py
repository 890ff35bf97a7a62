"""Scryfall-backed implementation of :class:`~mtg_card_search.core.protocols.SearchProvider`.

This module is the **only** place in the codebase that imports
``requests``.  Every transport, status, and body failure is caught here
and re-raised as a typed
:class:`~mtg_card_search.exceptions.CardSearchError` subclass.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mtg_card_search.exceptions import (
    ApiError,
    DecodeError,
    EnvironmentError,
    NetworkError,
    RateLimitedError,
    ResponseIOError,
)
from mtg_card_search.version import __version__

logger = logging.getLogger(__name__)


def _import_requests() -> Any:
    """Import requests lazily so ``--help`` works without it."""
    try:
        import requests
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "requests is not installed. Install with: pip install requests",
        ) from exc
    return requests


class ScryfallSearchProvider:
    """Concrete :class:`SearchProvider` backed by ``GET /cards/search``.

    Usage::

        provider = ScryfallSearchProvider()
        payload = provider.search("lightning bolt")

    One blocking request per call: no retry, no caching, and no explicit
    timeout (the transport defaults apply).
    """

    SEARCH_URL: str = "https://api.scryfall.com/cards/search"
    SORT_ORDER: str = "name"

    HEADERS: dict[str, str] = {
        "User-Agent": f"mtg-card-search/{__version__}",
        "Accept": "application/json",
    }

    def __init__(self, *, search_url: str | None = None) -> None:
        self._search_url: str = search_url or self.SEARCH_URL

    def build_params(self, query: str) -> dict[str, str]:
        """Return the query-string parameters for *query*."""
        return {"q": query, "order": self.SORT_ORDER}

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def search(self, query: str) -> Any:
        """Fetch the first result page for *query* and decode its JSON body.

        Raises
        ------
        NetworkError
            When the request cannot be sent or no response arrives.
        RateLimitedError
            On HTTP 429.
        ApiError
            On any other non-200 status.
        ResponseIOError
            When the body cannot be read.
        DecodeError
            When the body is not valid JSON.
        """
        requests = _import_requests()
        params = self.build_params(query)
        logger.debug("GET %s params=%s", self._search_url, params)

        try:
            response = requests.get(
                self._search_url,
                params=params,
                headers=self.HEADERS,
                stream=True,
            )
        except requests.RequestException as exc:
            raise NetworkError(
                f"Failed to make request: {exc}",
                hint="Check your network connection.",
            ) from exc

        try:
            status = response.status_code
            logger.debug("response status %d", status)

            if status == 429:
                raise RateLimitedError(
                    "Rate limited by Scryfall API.",
                    hint="Wait a moment before searching again.",
                )

            if status != 200:
                try:
                    text = self._read_body(response).decode("utf-8", errors="replace")
                except ResponseIOError:
                    text = ""
                raise ApiError(status, text, hint=_error_details(text))

            body = self._read_body(response)
        finally:
            response.close()

        try:
            return json.loads(body)
        except ValueError as exc:
            raise DecodeError(f"Failed to parse JSON: {exc}") from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read_body(response: Any) -> bytes:
        """Read the full (streamed) response body."""
        requests = _import_requests()
        try:
            return response.content
        except (requests.RequestException, OSError) as exc:
            raise ResponseIOError(f"Failed to read response: {exc}") from exc


def _error_details(text: str) -> str | None:
    """Pull ``details`` out of a Scryfall error object, if *text* is one."""
    try:
        payload = json.loads(text)
    except ValueError:
        return None
    if not isinstance(payload, dict) or payload.get("object") != "error":
        return None
    details = payload.get("details")
    return details if isinstance(details, str) and details else None
