# glyphlog/logger.py
"""The leveled console + file Logger.

Every logging call is formatted once and fanned out to two sinks:

* the open log file, if any, which receives every record regardless of the
  level, with ANSI colors stripped;
* standard output, which receives the colorized record only when the
  configured level is at least the record's severity.

Calls are synchronous: formatting, the file append and the console print all
happen on the calling thread before the call returns.
"""

import os
from collections.abc import Sequence
from typing import Any, NoReturn, Self, TextIO

from .config import DEFAULT_TIME_FORMAT, LoggerConfig
from .levels import Severity
from .log_config import logger
from .stack import capture_stack, caller_location, format_stack
from .template import TemplateSet, format_record


class Logger:
    """Leveled logger writing colorized records to stdout and plain ones to a file.

    A Logger owns its file handle. It does no internal locking: calling
    ``set_file_sink``, ``set_file_name`` or ``close`` while another thread is
    logging through the same instance is the caller's responsibility to
    synchronize. Concurrent logging calls may interleave at the granularity
    of single writes.

    Logging methods never raise. Write failures are reported on the Loguru
    diagnostics channel and the record is dropped. Failing to delete or open
    the file sink is treated as fatal and terminates the process with
    ``SystemExit(1)``.

    Attributes:
        _config: Mutable logger state, updated in place by the setters.
        _file: Open file sink, or None when no file is configured.
    """

    def __init__(
        self,
        level: Severity | int | str = Severity.VERBOSE,
        file_name: str = "",
        need_prefix: bool = True,
        prefix: str = "",
        truncate: bool = False,
        *,
        time_format: str = DEFAULT_TIME_FORMAT,
        templates: Sequence[str] | None = None,
    ):
        """Initialize the Logger and open its file sink, if any.

        Args:
            level: Most verbose severity printed to the console.
            file_name: Path of the append-only file sink; empty disables it.
            need_prefix: Show the severity tag in the default format.
            prefix: Custom prefix substituted for ``{p}``.
            truncate: Delete ``file_name`` before opening it.
            time_format: strftime format substituted for ``{t}``.
            templates: One to four record templates; None keeps the default
                format.

        Raises:
            ConfigurationError: If ``level`` or ``templates`` is invalid.
        """
        self._config = LoggerConfig(
            level=level,
            need_prefix=need_prefix,
            prefix=prefix,
            truncate=truncate,
            time_format=time_format,
            templates=TemplateSet.from_strings(*templates) if templates else None,
        )
        self._file: TextIO | None = None
        self.set_file_sink(file_name, truncate)

    @classmethod
    def from_config(cls, config: LoggerConfig) -> Self:
        """Create a Logger from an existing configuration."""
        templates = config.templates
        return cls(
            config.level,
            config.file_name,
            config.need_prefix,
            config.prefix,
            config.truncate,
            time_format=config.time_format,
            templates=[templates.first, templates.mid, templates.last, templates.single]
            if templates
            else None,
        )

    @property
    def config(self) -> LoggerConfig:
        """A snapshot of the current configuration."""
        return self._config.model_copy()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # --- Logging ---

    def error(self, *message: Any, stacklevel: int = 1) -> None:
        self._log(Severity.ERROR, message, stacklevel)

    def warn(self, *message: Any, stacklevel: int = 1) -> None:
        self._log(Severity.WARN, message, stacklevel)

    def info(self, *message: Any, stacklevel: int = 1) -> None:
        self._log(Severity.INFO, message, stacklevel)

    def debug(self, *message: Any, stacklevel: int = 1) -> None:
        self._log(Severity.DEBUG, message, stacklevel)

    def verbose(self, *message: Any, stacklevel: int = 1) -> None:
        self._log(Severity.VERBOSE, message, stacklevel)

    def error_with_stack(self, err: BaseException | None, stacklevel: int = 1) -> None:
        """Log ``err`` at ERROR followed by the current call stack.

        The first line of the record is ``str(err)``; each following line is
        one frame, ``at <function> in <file>:<line>``, starting with the
        caller of this method. Does nothing when ``err`` is None.

        Args:
            err: The error to log.
            stacklevel: Frames to skip, as in the logging methods.
        """
        if err is None:
            return
        frames = capture_stack(skip_frames=stacklevel)
        # str(err) runs inside format_record, so a failing __str__ is reported.
        self._log(Severity.ERROR, (err, "\n", format_stack(frames)), stacklevel)

    def _log(self, severity: Severity, message: Sequence[Any], stacklevel: int) -> None:
        # depth 0 is _log, 1 the public method, 2 its caller.
        caller_file, caller_line = caller_location(stacklevel + 1)
        try:
            record = format_record(
                message, severity, self._config, caller_file, caller_line
            )
        except Exception:
            logger.exception(f"Could not format {severity.name} record")
            return

        self._write_file(record.file)
        if self._config.level >= severity:
            try:
                print(record.console)
            except (OSError, ValueError) as e:
                logger.error(f"error writing to stdout: {e}")

    def _write_file(self, text: str) -> None:
        if self._file is None:
            return
        try:
            self._file.write(text + "\n")
            self._file.flush()
        except (OSError, ValueError) as e:
            logger.error(f"error writing to file {self._config.file_name}: {e}")

    # --- Configuration ---

    def set_level(self, level: Severity | int | str) -> None:
        """Set the console threshold; accepts a Severity, its value or name."""
        self._config.level = level  # type: ignore[assignment]

    def set_file_sink(self, file_name: str, truncate: bool = False) -> None:
        """Replace the file sink.

        Closes the current file, then, unless ``file_name`` is empty, opens
        ``file_name`` for appending. With ``truncate`` the file is deleted
        first; a missing file is fine.

        Raises:
            SystemExit: If the file cannot be deleted or opened.
        """
        self.close()
        self._config.file_name = file_name
        self._config.truncate = truncate
        if not file_name:
            return

        if truncate:
            try:
                os.remove(file_name)
            except FileNotFoundError:
                pass
            except OSError as e:
                _fatal(f"error removing file {file_name}", e)

        try:
            self._file = open(file_name, "a", encoding="utf-8")
        except OSError as e:
            _fatal(f"error opening file {file_name}", e)
        logger.debug(f"Opened file sink {file_name} (truncate={truncate})")

    def set_file_name(self, file_name: str) -> None:
        """Reopen the file sink at ``file_name`` with the current truncate flag."""
        self.set_file_sink(file_name, self._config.truncate)

    def set_need_prefix(self, need_prefix: bool) -> None:
        self._config.need_prefix = need_prefix

    def set_prefix(self, prefix: str) -> None:
        self._config.prefix = prefix

    def set_time_format(self, time_format: str) -> None:
        self._config.time_format = time_format

    def set_templates(self, *templates: str) -> None:
        """Set one to four templates (first, mid, last, single).

        Missing templates cascade: ``first`` fills the rest, a given ``mid``
        also covers ``last``, and ``single`` defaults to ``first``.

        Raises:
            ConfigurationError: If zero or more than four templates are given.
        """
        self._config.templates = TemplateSet.from_strings(*templates)

    def close(self) -> None:
        """Close the file sink. Safe to call more than once."""
        if self._file is None:
            return
        file, self._file = self._file, None
        try:
            file.close()
        except OSError as e:
            logger.error(f"error closing file {self._config.file_name}: {e}")


def _fatal(message: str, exc: OSError) -> NoReturn:
    logger.critical(f"{message}: {exc}")
    raise SystemExit(1) from exc
