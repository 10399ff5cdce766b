from __future__ import annotations

import os
from typing import Optional, Union


class LoggerError(Exception):
    """Base class for every error raised by a :class:`~lawg.Logger`."""


class ConfigurationError(LoggerError):
    """A file operation was requested but no log file is configured."""


class LogFileError(LoggerError, OSError):
    """
    The log file could not be opened or written.

    The original ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: Optional[Union[str, os.PathLike]], reason: str) -> None:
        self.path = path
        super().__init__(f"Could not write log file '{path}': {reason}")
