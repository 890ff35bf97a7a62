"""Custom exception hierarchy for mtg-card-search.

Every error that crosses a layer boundary inherits from
:class:`CardSearchError`.  Raw ``requests`` exceptions never leave the
infrastructure layer; they are caught there and re-raised as one of the
typed subclasses below.

Hierarchy
---------
CardSearchError
├── InputReadError
├── InvalidQueryError
├── NetworkError
├── RateLimitedError
├── ApiError
├── ResponseIOError
├── DecodeError
└── EnvironmentError
"""

from __future__ import annotations


class CardSearchError(Exception):
    """Base exception for all mtg-card-search errors.

    The CLI renders these as a single line (plus an optional hint)
    instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- User input ------------------------------------------------------------

class InputReadError(CardSearchError):
    """Raised when a line of user input cannot be read."""


class InvalidQueryError(CardSearchError):
    """Raised when a search is attempted with an empty query."""


# --- Transport -------------------------------------------------------------

class NetworkError(CardSearchError):
    """Raised when the search API cannot be reached."""


class ResponseIOError(CardSearchError):
    """Raised when the response body cannot be read."""


# --- API status ------------------------------------------------------------

class RateLimitedError(CardSearchError):
    """Raised when the API answers with HTTP 429."""


class ApiError(CardSearchError):
    """Raised for any non-200 status other than 429."""

    def __init__(
        self,
        status_code: int,
        body: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"API returned status {status_code}: {body}", hint=hint)
        self.status_code: int = status_code
        self.body: str = body


# --- Payload ---------------------------------------------------------------

class DecodeError(CardSearchError):
    """Raised when the response body is not the expected JSON shape."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CardSearchError):
    """Raised when a required runtime dependency is not available."""
