"""Package-wide logger."""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("clippy")
logger.addHandler(logging.NullHandler())

_FORMAT = "%(name)s: %(levelname)s %(message)s"
_handler: logging.Handler | None = None


def setup_logging(verbose: bool = False) -> None:
    """Send package log records to stderr (DEBUG when *verbose*)."""
    global _handler
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
