"""glyphlog: leveled console and file logging with templated, glyph-tagged records.

Records are formatted from configurable templates (timestamp, custom prefix,
severity color and glyph, caller file and line, message text), printed in
color to stdout when the level allows it and appended without colors to an
optional log file.

Use a :class:`Logger` directly, or the module-level functions, which delegate
to a lazily created process-wide default Logger.
"""

__version__ = "0.1.0"

from . import (
    config,
    default,
    escapes,
    exceptions,
    levels,
    log_config,
    render,
    stack,
    template,
)
from .config import LoggerConfig, LoggerSettings, get_settings
from .default import (
    close,
    debug,
    error,
    error_with_stack,
    get_default_logger,
    info,
    set_file_name,
    set_file_sink,
    set_level,
    set_need_prefix,
    set_prefix,
    set_templates,
    set_time_format,
    verbose,
    warn,
)
from .escapes import strip_escapes
from .exceptions import ConfigurationError, GlyphlogError
from .levels import STYLES, Severity, SeverityStyle
from .logger import Logger
from .render import render_hex, render_struct
from .stack import StackFrame, capture_stack, format_stack
from .template import FormattedRecord, TemplateSet, format_record

__all__ = [
    "__version__",
    "config",
    "default",
    "escapes",
    "exceptions",
    "levels",
    "log_config",
    "render",
    "stack",
    "template",
    "ConfigurationError",
    "FormattedRecord",
    "GlyphlogError",
    "Logger",
    "LoggerConfig",
    "LoggerSettings",
    "STYLES",
    "Severity",
    "SeverityStyle",
    "StackFrame",
    "TemplateSet",
    "capture_stack",
    "close",
    "debug",
    "error",
    "error_with_stack",
    "format_record",
    "format_stack",
    "get_default_logger",
    "get_settings",
    "info",
    "render_hex",
    "render_struct",
    "set_file_name",
    "set_file_sink",
    "set_level",
    "set_need_prefix",
    "set_prefix",
    "set_templates",
    "set_time_format",
    "strip_escapes",
    "verbose",
    "warn",
]
