"""Logging set-up shared by the search, validator and CLI."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Send all records to stderr as ``time | level | logger | message``.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Module logger under the ``acreage`` namespace; sets up stderr output on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "acreage")
