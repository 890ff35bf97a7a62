"""Process exit codes for the ``mtg-card-search`` command.

A session always ends with :data:`SUCCESS`; search and input failures are
reported at the prompt, never through the exit status.  The other values
only describe the process being interrupted or crashing.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Exit command or end of input."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
