"""Logging setup for applications embedding the library registry."""

import logging
import sys

from .config import LibraryConfig, get_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LibraryConfig | None = None) -> logging.Logger:
    """Send registry logs to stderr at the configured level.

    Returns the package logger so callers can attach further handlers.
    """
    config = config or get_config()

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    package_logger = logging.getLogger("library_registry")
    package_logger.setLevel(config.log_level)
    if config.is_development:
        package_logger.debug("Debug mode enabled - logging every rejected borrow")
    return package_logger
