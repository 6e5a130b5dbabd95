"""
Logging Configuration.

Every module obtains its logger through `get_logger(__name__)`, so all
output from the conversion engine shares one format and one handler.
Failed conversions are logged with the offending inputs, which is usually
enough to reproduce a bad grid reading after the fact.
"""

import logging
import sys
from typing import Iterable


LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

PACKAGE_LOGGERS = ("common", "geospatial", "validation")


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the grid conversion system.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def set_package_level(level: int, names: Iterable[str] = PACKAGE_LOGGERS) -> None:
    """Set the level of every already-created logger under the given packages.

    Parameters
    ----------
    level : int
        Logging level, e.g. ``logging.DEBUG`` to see rejected conversions.
    names : iterable of str
        Top-level package names whose loggers are adjusted.
    """
    prefixes = tuple(names)
    for logger_name, logger in logging.Logger.manager.loggerDict.items():
        if not isinstance(logger, logging.Logger):
            continue
        if logger_name in prefixes or logger_name.startswith(tuple(p + "." for p in prefixes)):
            logger.setLevel(level)
