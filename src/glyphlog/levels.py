# glyphlog/levels.py
"""Severity levels and their fixed console styling.

Each severity carries an immutable style triple (color on, glyph, color off)
that the template placeholders ``{s0}``, ``{s1}``, ``{s2}`` and ``{s}`` expand
to. The styles are not user-configurable.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict

from .exceptions import ConfigurationError

COLOR_RESET = "\033[0m"


class Severity(IntEnum):
    """Ordered logging levels; a higher value is more verbose."""

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3
    VERBOSE = 4

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity":
        """Coerce a severity, its numeric value or its name into a Severity.

        Names are case-insensitive. ``WARNING`` is accepted for WARN and
        ``DEBUG2`` for VERBOSE. Digit strings such as ``"2"`` (as read from
        environment variables) are treated as numeric values.

        Raises:
            ConfigurationError: If the value names no severity.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ConfigurationError(f"Invalid severity: {value!r}", value=value)
        number = value
        if isinstance(value, str) and value.strip().isdecimal():
            number = int(value)
        if isinstance(number, int):
            try:
                return cls(number)
            except ValueError as e:
                raise ConfigurationError(
                    f"Severity out of range 0..{len(cls) - 1}: {value}", value=value
                ) from e
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            if name in cls.__members__:
                return cls[name]
        raise ConfigurationError(f"Unknown severity: {value!r}", value=value)


_ALIASES = {"WARNING": "WARN", "DEBUG2": "VERBOSE"}


class SeverityStyle(BaseModel):
    """Console styling for one severity."""

    model_config = ConfigDict(frozen=True)

    color_on: str
    glyph: str
    color_off: str = COLOR_RESET

    @property
    def tag(self) -> str:
        """Color, glyph and reset concatenated, as substituted for ``{s}``."""
        return f"{self.color_on}{self.glyph}{self.color_off}"


STYLES: dict[Severity, SeverityStyle] = {
    Severity.ERROR: SeverityStyle(color_on="\033[31m", glyph="E"),
    Severity.WARN: SeverityStyle(color_on="\033[33m", glyph="W"),
    Severity.INFO: SeverityStyle(color_on="\033[34m", glyph="I"),
    Severity.DEBUG: SeverityStyle(color_on="\033[35m", glyph="D"),
    Severity.VERBOSE: SeverityStyle(color_on="\033[36m", glyph="V"),
}


def style_for(severity: Severity) -> SeverityStyle:
    """Return the fixed style triple of ``severity``."""
    return STYLES[severity]
