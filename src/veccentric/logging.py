"""
Package logger and exception types.

veccentric is a library, so it never installs handlers of its own. Its loggers
live under ``veccentric`` (e.g. ``veccentric.rand``) and only emit DEBUG
records; applications opt in with their usual setup, for example
``logging.getLogger("veccentric").setLevel(logging.DEBUG)``.
"""

from __future__ import annotations

import logging

LOGGER_ID = "veccentric"
vecc_logger = logging.getLogger(LOGGER_ID)
vecc_logger.addHandler(logging.NullHandler())


class VeccError(Exception):
    """
    Generic veccentric error.
    """

    pass


class VeccValueError(VeccError, ValueError):
    """
    Value error raised when an argument passed to veccentric is out of its documented domain.
    """

    pass
