"""Shared pytest fixtures and configuration for the mtg-card-search test suite.

Guidelines
----------
* No internet access in any test: ``requests.get`` or the provider is mocked.
* The post-search delay is always replaced with a no-op sleep.
* Output is asserted through ``capsys``.
"""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from emitting ANSI codes into captured output."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE", "COLUMNS"):
        monkeypatch.delenv(name, raising=False)
