"""
Logging Configuration
Sets up the 'diatomic_md' logger for the CLI and the Streamlit app.

The CLI maps repeated -v flags to a level with level_for_verbosity().
The Streamlit app calls setup_logging() on every script rerun, so the
function only ever replaces the handlers it installed itself.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "diatomic_md"

# Marks handlers owned by setup_logging
HANDLER_TAG = "_diatomic_md_handler"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def level_for_verbosity(verbosity: int) -> int:
    """
    Log level for a count of -v flags.

    0 -> WARNING (run summaries only), 1 -> INFO (one line per run),
    2 or more -> DEBUG (engine state transitions).
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def _owned_handlers(logger: logging.Logger):
    return [h for h in logger.handlers if getattr(h, HANDLER_TAG, False)]


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'diatomic_md' namespace.

    Safe to call repeatedly: handlers from an earlier call are replaced,
    handlers added by anyone else are left alone.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path; the log is written there as well (overwritten)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in _owned_handlers(logger):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, HANDLER_TAG, True)
        logger.addHandler(handler)

    logger.debug("Logging initialized at %s", logging.getLevelName(level))
    return logger
