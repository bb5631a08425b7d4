"""Logger setup for the klistra command line and library modules."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    module_name: str = "klistra",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a timestamped stream handler to ``module_name`` and set its level.

    Calling it again for the same logger only changes the level, so the
    CLI can raise verbosity without stacking handlers. Module loggers
    (``logging.getLogger(__name__)``) propagate into the ``klistra`` logger.

    Args:
        level: Threshold for the logger.
        module_name: Logger to configure.
        stream: Handler destination; stdout when omitted.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
