"""Logging setup for the ``promptimize`` logger tree."""

import logging
from typing import Optional

from rich.logging import RichHandler

from .config import LoggingSettings, get_settings

ROOT_LOGGER = "promptimize"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Attach a single handler to the package logger.

    Calling it again replaces the previous handler, so the CLI and the API
    factory can both call it safely.

    Args:
        settings: Logging settings (defaults to the cached global settings)

    Returns:
        The configured package logger
    """
    settings = settings or get_settings().logging
    logger = logging.getLogger(ROOT_LOGGER)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if settings.format == "rich":
        handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(settings.level.upper())
    logger.propagate = False
    return logger
