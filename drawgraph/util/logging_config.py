"""
Logging Configuration
Sets up the logger for the drawgraph namespace.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'drawgraph' logger. Draw and rotate traces of leaf shapes
    are emitted at INFO, group forwarding and lifecycle events at DEBUG.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write the trace to.
    """
    logger = logging.getLogger("drawgraph")
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    fmt = logging.Formatter(
        "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s", datefmt="%H:%M:%S"
    )

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.debug("Logging initialized.")
    return logger
