"""Logging configuration for the Craftlab Careers matching core."""

import logging
import sys
from typing import Optional, Union

from craftlab_careers.config import LOG_LEVEL


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    if level is not None:
        logger.setLevel(level)
    return logger
