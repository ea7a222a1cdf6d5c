# glyphlog/default.py
"""Process-wide default Logger and module-level shortcuts.

The default Logger is built on first use from :func:`glyphlog.config.get_settings`
(level VERBOSE, no file sink and the default format unless ``GLYPHLOG_*``
environment variables say otherwise) and lives for the rest of the process.
Every function here delegates to it, so ``glyphlog.info("ready")`` works
without creating a Logger.
"""

from functools import lru_cache
from typing import Any

from .config import get_settings
from .levels import Severity
from .logger import Logger


@lru_cache
def get_default_logger() -> Logger:
    """
    Provides access to the shared default Logger.

    The instance is created once, from the cached settings, and never closed
    implicitly.

    Returns:
        Logger: The default Logger instance.
    """
    return Logger.from_config(get_settings().to_config())


# Wrappers add one to stacklevel so {f} and {l} name their own caller.


def error(*message: Any, stacklevel: int = 1) -> None:
    get_default_logger().error(*message, stacklevel=stacklevel + 1)


def warn(*message: Any, stacklevel: int = 1) -> None:
    get_default_logger().warn(*message, stacklevel=stacklevel + 1)


def info(*message: Any, stacklevel: int = 1) -> None:
    get_default_logger().info(*message, stacklevel=stacklevel + 1)


def debug(*message: Any, stacklevel: int = 1) -> None:
    get_default_logger().debug(*message, stacklevel=stacklevel + 1)


def verbose(*message: Any, stacklevel: int = 1) -> None:
    get_default_logger().verbose(*message, stacklevel=stacklevel + 1)


def error_with_stack(err: BaseException | None, stacklevel: int = 1) -> None:
    get_default_logger().error_with_stack(err, stacklevel=stacklevel + 1)


def set_level(level: Severity | int | str) -> None:
    get_default_logger().set_level(level)


def set_file_sink(file_name: str, truncate: bool = False) -> None:
    get_default_logger().set_file_sink(file_name, truncate)


def set_file_name(file_name: str) -> None:
    get_default_logger().set_file_name(file_name)


def set_need_prefix(need_prefix: bool) -> None:
    get_default_logger().set_need_prefix(need_prefix)


def set_prefix(prefix: str) -> None:
    get_default_logger().set_prefix(prefix)


def set_time_format(time_format: str) -> None:
    get_default_logger().set_time_format(time_format)


def set_templates(*templates: str) -> None:
    get_default_logger().set_templates(*templates)


def close() -> None:
    get_default_logger().close()
