"""
Logging helpers for genomeplot.

Library modules only ever call ``get_logger(__name__)``. The command-line
entry point calls ``configure_logging()`` once, which attaches a stderr
handler to the ``genomeplot`` logger (never the root logger).
"""

import logging
import os
import sys

LOGGER_NAME = "genomeplot"
LEVEL_ENV_VAR = "GENOMEPLOT_LOG_LEVEL"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level=None, *, fmt=None, datefmt=None, force=False):
    """
    Configure the genomeplot logger.

    Args:
        level: Level name or number. Defaults to $GENOMEPLOT_LOG_LEVEL, then "INFO".
        fmt: Log record format.
        datefmt: Timestamp format.
        force: Replace handlers already installed by an earlier call.
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        # Already configured by a previous call.
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                h.setLevel(level)
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT))
    logger.addHandler(console)


def get_logger(name=None):
    """Return ``logging.getLogger(name)``, or the package logger when name is None."""
    return logging.getLogger(name or LOGGER_NAME)
