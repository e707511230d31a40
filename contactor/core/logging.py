"""Logging setup shared by the CLI and library entry points."""
from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """Send log records to stderr with the shared format.

    The level comes from ``level`` or the ``LOG_LEVEL`` environment variable
    (``INFO`` when neither is set). stdout stays reserved for rendered
    contacts, so a CSV piped to a file never picks up log lines.
    """

    resolved_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=resolved_level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )
