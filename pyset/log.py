"""
Logger configuration for the pyset package.
"""
import logging

from .config import DEFAULT_SETTINGS, SetSettings

LOGGER_NAME = "pyset"
HANDLER_NAME = "pyset.stream"


def configure_logging(level: int | str | None = None,
                      settings: SetSettings = DEFAULT_SETTINGS) -> logging.Logger:
    """
    Sends pyset log records to stderr as bare messages.
    The level defaults to settings.log_level. Calling this again only
    adjusts the level of the handler added here; handlers attached by the
    caller are left alone.
    """
    if level is None:
        level = settings.log_level
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    handler = next((h for h in logger.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.propagate = False
    return logger
