"""CLI layer — argument parsing, the interactive loop, and the error boundary.

This package is the outermost layer of the application.  It may import
from ``core`` and ``infra``, but no other layer may import from ``cli``.
"""
