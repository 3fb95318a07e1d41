# -*- coding: utf-8 -*-
"""Logger helpers.

All loggers of the package are children of the `sudokugen` logger, which owns
the only handler. Its level comes from the `SUDOKUGEN_LOG_LEVEL` environment
variable, so one setting controls every module.
"""
import logging
import os
import sys
from typing import Optional

from sudokugen.common.constants import LOG_LEVEL_ENV_VAR

ROOT_LOGGER_NAME = "sudokugen"

_FORMAT = "%(levelname)s %(asctime)s [%(filename)s:%(lineno)d]: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _setup_root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    # other tools (e.g. pytest log capture) may attach handlers of their own
    if not any(h.get_name() == ROOT_LOGGER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(ROOT_LOGGER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper())
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger of the package.

    Args:
        name (`Optional[str]`): The name of the logger, usually `__name__`.
            Default to the package logger.
        level (`Optional[str]`): If set, the level of the returned logger.

    Returns:
        `logging.Logger`: The logger.
    """
    _setup_root_logger()
    logger = logging.getLogger(name or ROOT_LOGGER_NAME)
    if level is not None:
        logger.setLevel(level.upper())
    return logger
