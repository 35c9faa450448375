"""Logging configuration for xkpwgen."""

from __future__ import annotations

import logging


_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: str | None = None,
) -> logging.Logger:
    """Configure and return the xkpwgen logger.

    verbose: set DEBUG level (all messages)
    quiet: set WARNING level (errors and warnings only)
    log_file: write log records to this path

    Without log_file nothing is attached, so stderr stays free for the
    Console and stdout for passphrases.
    """
    logger = logging.getLogger("xkpwgen")

    # Clear existing handlers to avoid duplication on repeated calls
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(file_handler)
    else:
        logger.addHandler(logging.NullHandler())

    return logger
