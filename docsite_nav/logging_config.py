"""Logging configuration for the sitenav command."""

import sys

from loguru import logger


def configure_logging(*, verbose: bool = False) -> None:
    """Route loguru output to stderr at DEBUG when verbose, else INFO."""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level, format="{level}: {message}")
