#!/usr/bin/env python3

# Word-level ("intra-line") highlighting for unified diff output

__version__ = '0.3.1'

import os
import sys

from loguru import logger

from intraline.diff import (
    CharDiffer,
    Segment,
    TokenDiffer,
    WordDiffer,
    create_word_differ,
)


def get_version():
    return __version__


def setup_logger(level=None):
    """
    Configure loguru sinks for applications embedding intraline.

    TRACE/DEBUG/INFO/SUCCESS go to stdout, everything else to stderr.
    The level is taken from the argument, then the LOGGER_LEVEL env var, then DEBUG.
    """
    # Set a default logger level
    logger_level = 'DEBUG'
    if level is None and os.getenv("LOGGER_LEVEL"):
        level = os.getenv("LOGGER_LEVEL")
    if level is not None:
        level = str(level)
        logger_level = int(level) if level.isdigit() else level.upper()

    # Without this, a logger will be duplicated
    logger.remove()
    log_level_for_stdout = {'TRACE', 'DEBUG', 'INFO', 'SUCCESS'}
    logger.configure(handlers=[
        {"sink": sys.stdout, "level": logger_level,
         "filter": lambda record: record['level'].name in log_level_for_stdout},
        {"sink": sys.stderr, "level": logger_level,
         "filter": lambda record: record['level'].name not in log_level_for_stdout},
    ])
    return logger_level


__all__ = [
    'CharDiffer',
    'Segment',
    'TokenDiffer',
    'WordDiffer',
    'create_word_differ',
    'get_version',
    'setup_logger',
]
