# vecn/logging_config.py
"""
Logging for the vecn package.

Every module logs through a child of the "vecn" logger. The package only
attaches a NullHandler on import; output is opt-in through setup_logging,
which configures the "vecn" logger and leaves the root logger alone.
"""
import logging
from typing import Optional, Union

from vecn import config

PACKAGE_LOGGER = "vecn"

# Handlers installed by setup_logging, replaced on the next call
_installed_handlers = []

def get_logger(name: str) -> logging.Logger:
    """
    Retrieve a logger for a vecn module.

    Args:
        name: Module name, normally __name__ (e.g. "vecn.registry").

    Returns:
        The logger, a child of the "vecn" logger.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)

def attach_null_handler() -> None:
    """Keeps vecn silent until the application configures logging."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())

def setup_logging(level: Optional[Union[int, str]] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send vecn log records to the console and optionally a file.

    Calling it again swaps the handlers it installed before; handlers added
    by anyone else, on "vecn" or on the root logger, are left in place.

    Args:
        level: Logging level (e.g., logging.INFO, "DEBUG"). Defaults to VECN_LOG_LEVEL.
        log_file: Optional path to a file for logging output.

    Returns:
        The "vecn" logger.
    """
    if level is None:
        level = config.LOG_LEVEL

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _installed_handlers.append(handler)
    return logger
