"""Logging setup for applications using tryoutgeom.

Library modules only create ``logging.getLogger(__name__)`` loggers
and never configure them; ``setup_logging`` attaches handlers to the
``tryoutgeom`` namespace logger for the command line tool.
"""

import logging
import sys
from typing import Optional

from tryoutgeom.errors import TryoutGeomError

LOGGER_NAME = 'tryoutgeom'
LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _attach(logger, handler, level):
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[str] = None) -> logging.Logger:
    """Send ``tryoutgeom`` log records to stderr, and to ``log_file``
    (truncated) when one is given.

    Calling this again replaces the handlers of the previous call.  A
    log file that cannot be opened raises ``TryoutGeomError``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    ## drop handlers left by an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stderr), level)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        except OSError as e:
            raise TryoutGeomError('cannot open log file {}: {}'.format(log_file, e)) from e
        _attach(logger, file_handler, level)

    logger.debug('logging to stderr%s at level %s',
                 ' and {}'.format(log_file) if log_file else '',
                 logging.getLevelName(level))
    return logger
