# -*- coding: utf-8 -*-
"""
Package logger setup. Modules log through children of the "interview_assist" logger.
"""
import logging
import os

LOG_LEVEL = os.getenv("INTERVIEW_ASSIST_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("interview_assist")
# The Lambda runtime installs its own root handler; only add one for local runs.
if not logger.handlers and not logging.getLogger().handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)

logger.setLevel(LOG_LEVEL)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package logger."""
    return logging.getLogger(name)
