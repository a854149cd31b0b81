"""Shared application logger"""

import logging
import sys


FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger("mdblog")


def setup_logger(level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the mdblog logger (once) and set its level."""
    logger.setLevel(level.upper())
    if not logger.handlers:
        ch = logging.StreamHandler(sys.stdout)
        ch.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(ch)
    return logger
