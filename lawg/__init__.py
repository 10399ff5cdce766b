"""
lawg: a small named logger that prints timestamped lines to the console
and/or appends them to a log file.

Example::

    from lawg import Logger

    logger = Logger("General Logger", "logs.txt", True)
    logger.log("Started")  # General Logger - [2024-01-01 00:00:00]: Started
    logger.log_to_file("Started again")
"""
from .config import LoggerConfig
from .errors import ConfigurationError, LogFileError, LoggerError
from .logger import Logger
from .utils.clock import local_now, utc_now
from .utils.process import terminate


__all__ = [
    "ConfigurationError",
    "LogFileError",
    "Logger",
    "LoggerConfig",
    "LoggerError",
    "local_now",
    "terminate",
    "utc_now",
]
