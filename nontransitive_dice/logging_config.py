"""
Logging configuration for the dice game.

Log records go to stderr; stdout belongs to the game's console protocol.
"""

import logging
import os
import sys

DEFAULT_LEVEL = "WARNING"

_FORMAT = '[%(asctime)s] %(name)s %(levelname)s: %(message)s'
_DATEFMT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(level: str = None) -> int:
    if level is None:
        level = os.getenv('LOG_LEVEL', DEFAULT_LEVEL)
    return getattr(logging, level.upper(), logging.WARNING)


def setup_logger(name: str, level: str = None) -> logging.Logger:
    """
    Setup a logger with stderr output.

    Args:
        name: Logger name (usually module name)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var LOG_LEVEL or WARNING

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(handler)
    return logger


def set_level(level: str):
    """Re-apply a level to every logger already created by setup_logger."""
    resolved = _resolve_level(level)
    for name in list(logging.root.manager.loggerDict):
        if name == 'nontransitive_dice' or name.startswith('nontransitive_dice.'):
            logging.getLogger(name).setLevel(resolved)
