"""Logging setup for the CLI.

Log records always go to stderr so that stdout carries only the
rendered search output.
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "mtg_card_search"


def configure_logging(verbose: bool = False) -> None:
    """Configure the root logger once: WARNING by default, DEBUG when *verbose*."""
    level = logging.DEBUG if verbose else logging.WARNING

    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        logging.basicConfig(
            level=level,
            format="%(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )

    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
