# glyphlog/template.py
"""Record templates and the formatter that fills them.

A record is rendered from up to four templates. Single-line messages use
``single``; multi-line messages use ``first`` for the opening line, ``mid``
for interior lines and ``last`` for the closing line.

Placeholders:
    {t}   timestamp, formatted with the logger's strftime format
    {p}   custom prefix
    {s}   full severity tag (color on, glyph, color off)
    {s0}  color on
    {s1}  glyph
    {s2}  color off
    {m}   text of the current line
    {f}   caller source file, relative to the startup working directory
    {l}   caller line number

``{m}`` is filled per line. The remaining placeholders are filled once over
the assembled block, so they also expand inside the message text.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any, NamedTuple

from pydantic import BaseModel, ConfigDict

from .escapes import strip_escapes
from .exceptions import ConfigurationError
from .levels import Severity, style_for
from .stack import relative_path

if TYPE_CHECKING:
    from .config import LoggerConfig

MAX_TEMPLATES = 4


class TemplateSet(BaseModel):
    """The four resolved templates of a logger."""

    model_config = ConfigDict(frozen=True)

    first: str
    mid: str
    last: str
    single: str

    @classmethod
    def from_strings(cls, *templates: str) -> "TemplateSet":
        """Build a set from one to four templates, cascading missing slots.

        ``first`` fills every slot it is alone in; a given ``mid`` also
        covers ``last``; ``single`` defaults to ``first`` unless given as the
        fourth template.

        Raises:
            ConfigurationError: If zero or more than four templates are given.
        """
        if not 1 <= len(templates) <= MAX_TEMPLATES:
            raise ConfigurationError(
                f"Expected 1 to {MAX_TEMPLATES} templates, got {len(templates)}",
                value=templates,
            )
        first = templates[0]
        mid = templates[1] if len(templates) > 1 else first
        last = templates[2] if len(templates) > 2 else mid
        single = templates[3] if len(templates) > 3 else first
        return cls(first=first, mid=mid, last=last, single=single)

    def for_line(self, index: int, count: int) -> str:
        """Pick the template for line ``index`` of a ``count``-line message."""
        if count == 1:
            return self.single
        if index == 0:
            return self.first
        if index == count - 1:
            return self.last
        return self.mid


def default_templates(need_prefix: bool) -> TemplateSet:
    """Templates used when a logger has no explicit ones.

    The opening line carries the timestamp; continuation lines repeat the
    prefix (and the severity tag when ``need_prefix`` is set) without it.
    """
    if need_prefix:
        return TemplateSet.from_strings("{t}{p}{s}: {m}", "{p}{s}: {m}")
    return TemplateSet.from_strings("{t}{p}{m}", "{p}{m}")


class FormattedRecord(NamedTuple):
    """One rendered record: colorized console text and escape-free file text."""

    console: str
    file: str


def join_message(message: Sequence[Any]) -> str:
    """Concatenate ``str()`` of every argument with no separator."""
    return "".join(str(part) for part in message)


def format_record(
    message: Sequence[Any],
    severity: Severity,
    config: "LoggerConfig",
    caller_file: str,
    caller_line: int,
    now: datetime | None = None,
) -> FormattedRecord:
    """Render one record for the console and for the file sink.

    Args:
        message: Arguments of the logging call, joined without separator.
        severity: Severity whose style fills the ``{s*}`` placeholders.
        config: Logger configuration supplying templates, prefix and time
            format.
        caller_file: Source path of the logging call site.
        caller_line: Line of the logging call site.
        now: Timestamp to render; defaults to the current local time.

    Returns:
        FormattedRecord: The colorized console text and the same text with
            ANSI escapes removed for the file.
    """
    templates = config.templates or default_templates(config.need_prefix)
    lines = join_message(message).split("\n")
    block = "\n".join(
        templates.for_line(i, len(lines)).replace("{m}", line)
        for i, line in enumerate(lines)
    )

    style = style_for(severity)
    timestamp = (now or datetime.now()).strftime(config.time_format)
    substitutions = (
        ("{f}", relative_path(caller_file) if caller_file else ""),
        ("{l}", str(caller_line)),
        ("{t}", timestamp),
        ("{p}", config.prefix),
        ("{s0}", style.color_on),
        ("{s1}", style.glyph),
        ("{s2}", style.color_off),
        ("{s}", style.tag),
    )
    for placeholder, value in substitutions:
        block = block.replace(placeholder, value)

    return FormattedRecord(console=block, file=strip_escapes(block))
