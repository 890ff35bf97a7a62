"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these contracts, never on the concrete
HTTP-backed implementation in ``infra``.
"""

from __future__ import annotations

from typing import Any, Protocol


class SearchProvider(Protocol):
    """Contract for card-search backends.

    Any object implementing :meth:`search` with this signature
    satisfies the protocol structurally.
    """

    def search(self, query: str) -> Any:
        """Run *query* against the backend and return the decoded JSON body.

        The value is whatever the JSON document decoded to; the core
        layer validates its shape.

        Raises
        ------
        NetworkError
            When the backend cannot be reached.
        RateLimitedError
            When the backend reports HTTP 429.
        ApiError
            For any other non-200 status.
        ResponseIOError
            When the response body cannot be read.
        DecodeError
            When the response body is not valid JSON.
        """
        ...  # pragma: no cover
