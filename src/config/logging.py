"""Logging configuration for the `jest-config` command."""

from __future__ import annotations

import logging
import os
import sys


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Log records go to stderr next to the reporter's notices; stdout carries nothing but the
    generated JSON configuration, so it can be redirected straight into a file.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
