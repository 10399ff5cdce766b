from __future__ import annotations

import os
import sys
from typing import Any, NoReturn, Optional, TextIO, Union

from .config import LoggerConfig
from .errors import ConfigurationError, LogFileError
from .utils.clock import Clock, format_timestamp, local_now, utc_now
from .utils.process import terminate


ERROR_PREFIX: str = "ERROR: "
FILE_ENCODING: str = "utf-8"


class Logger:
    """
    Named console + file logger.

    Every emitted line has the form::

        <name> - [<timestamp>]: <message>

    and error lines carry an ``ERROR: `` prefix. With timestamps disabled the
    brackets stay in place and are left empty.

    The configuration is fixed at construction. Nothing touches the
    filesystem until the first file write, and the file is opened in append
    mode and closed again on every write.
    """

    def __init__(
        self,
        name: str,
        file_path: Optional[Union[str, os.PathLike]] = None,
        include_timestamp: bool = True,
        *,
        use_utc: bool = True,
        clock: Optional[Clock] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._config = LoggerConfig(
            name=name,
            file_path=file_path,
            include_timestamp=include_timestamp,
            use_utc=use_utc,
        )
        self._clock = clock if clock is not None else _default_clock(use_utc)
        self._stream = stream

    @classmethod
    def from_config(
        cls,
        config: LoggerConfig,
        *,
        clock: Optional[Clock] = None,
        stream: Optional[TextIO] = None,
    ) -> "Logger":
        return cls(
            config.name,
            config.file_path,
            config.include_timestamp,
            use_utc=config.use_utc,
            clock=clock,
            stream=stream,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, file_path={self.file_path!r}, "
            f"include_timestamp={self.include_timestamp!r}, use_utc={self.use_utc!r})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def name(self) -> str:
        return self._config.name

    @property
    def file_path(self) -> Optional[Union[str, os.PathLike]]:
        return self._config.file_path

    @property
    def include_timestamp(self) -> bool:
        return self._config.include_timestamp

    @property
    def use_utc(self) -> bool:
        return self._config.use_utc

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_line(self, message: Any, *, error: bool = False) -> str:
        """
        Build a single log line for *message*.

        Args:
            message: Anything printable; rendered with ``str()``.
            error: Prefix the line with ``ERROR: ``.

        Returns:
            The line without a trailing newline.
        """
        timestamp = ""
        if self.include_timestamp:
            timestamp = format_timestamp(self._clock(), utc=self.use_utc)
        line = f"{self.name} - [{timestamp}]: {message}"
        return ERROR_PREFIX + line if error else line

    # ------------------------------------------------------------------
    # Plain messages
    # ------------------------------------------------------------------

    def log(self, message: Any) -> None:
        """Print a line to standard output."""
        self._write_console(self.format_line(message))

    def log_to_file(self, message: Any) -> None:
        """Append a line to the log file (not shown on the console)."""
        self._append_to_file(self.format_line(message))

    def log_and_log_to_file(self, message: Any) -> None:
        """Print a line and append the very same line to the log file."""
        line = self.format_line(message)
        self._write_console(line)
        self._append_to_file(line)

    # ------------------------------------------------------------------
    # Error messages
    # ------------------------------------------------------------------

    def error(self, message: Any) -> None:
        self._write_console(self.format_line(message, error=True))

    def error_to_file(self, message: Any) -> None:
        self._append_to_file(self.format_line(message, error=True))

    def error_and_error_to_file(self, message: Any) -> None:
        line = self.format_line(message, error=True)
        self._write_console(line)
        self._append_to_file(line)

    def log_error(self, message: Any) -> str:
        """
        Print an error line and, when a log file is configured, append it there.

        Unlike :meth:`error_and_error_to_file` a missing ``file_path`` is not an
        error here. The process keeps running; pair with
        :func:`lawg.terminate` to stop it.

        Returns:
            The line that was written.
        """
        line = self.format_line(message, error=True)
        self._write_console(line)
        if self.file_path is not None:
            self._append_to_file(line)
        return line

    def error_and_stop(self, message: Any, status: int = 1) -> NoReturn:
        """
        Write an error line (console, plus file if configured) and exit with *status*.

        The process exits even if the file write fails.
        """
        try:
            self.log_error(message)
        finally:
            terminate(status, self._stream)

    def error_and_stop_to_file(self, message: Any, status: int = 1) -> NoReturn:
        """
        Append an error line to the log file only, then exit with *status*.

        Raises ``ConfigurationError`` without exiting when no log file is
        configured. A failed write still exits; the ``LogFileError`` is left as
        the ``SystemExit`` context.
        """
        self._require_file_path()
        try:
            self.error_to_file(message)
        finally:
            terminate(status, self._stream)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _write_console(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(line, file=stream)

    def _require_file_path(self) -> None:
        if self.file_path is None:
            raise ConfigurationError(
                f"Logger '{self.name}' has no log file configured; "
                f"pass 'file_path' to write to a file."
            )

    def _append_to_file(self, line: str) -> None:
        self._require_file_path()
        # Encode before opening so an unencodable message leaves the file untouched.
        try:
            data = (line + "\n").encode(FILE_ENCODING)
        except UnicodeError as exc:
            raise LogFileError(self.file_path, str(exc)) from exc
        try:
            with open(self.file_path, "ab") as f:
                f.write(data)
        except OSError as exc:
            raise LogFileError(self.file_path, exc.strerror or str(exc)) from exc


def _default_clock(use_utc: bool) -> Clock:
    return utc_now if use_utc else local_now
