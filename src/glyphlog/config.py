# glyphlog/config.py
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import Severity
from .template import TemplateSet

DEFAULT_TIME_FORMAT = "[%Y-%m-%d %H:%M:%S] "


class LoggerConfig(BaseModel):
    """
    Mutable state of a single Logger.

    Setters on the owning Logger assign fields in place; assignments are
    validated, so an unknown level name raises ConfigurationError at the
    setter rather than at the next logging call.
    """

    model_config = ConfigDict(validate_assignment=True)

    level: Severity = Field(
        default=Severity.VERBOSE,
        description="Most verbose severity that is still printed to the console",
    )
    file_name: str = Field(
        default="", description="Path of the file sink; empty disables it"
    )
    truncate: bool = Field(
        default=False, description="Delete the file sink before opening it"
    )
    need_prefix: bool = Field(
        default=True,
        description="Show the severity tag in the default (untemplated) format",
    )
    prefix: str = Field(default="", description="Custom prefix substituted for {p}")
    time_format: str = Field(
        default=DEFAULT_TIME_FORMAT, description="strftime format for {t}"
    )
    templates: TemplateSet | None = Field(
        default=None, description="Explicit templates; None uses the default format"
    )

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> Severity:
        return Severity.parse(value)  # type: ignore[arg-type]


class LoggerSettings(BaseSettings):
    """
    Settings for the process-wide default logger, loaded from environment
    variables (prefixed with 'GLYPHLOG_') or a .env file.

    Explicitly constructed loggers ignore these settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GLYPHLOG_",
        extra="ignore",  # Ignore unrelated variables found in .env
        case_sensitive=False,
    )

    level: str = Field(default="VERBOSE", description="Console severity threshold")
    file_name: str = Field(default="", description="File sink path; empty disables it")
    truncate: bool = Field(
        default=False, description="Delete the file sink before opening it"
    )
    need_prefix: bool = Field(
        default=True, description="Severity tag in the default format"
    )
    prefix: str = Field(default="", description="Custom prefix for {p}")
    time_format: str = Field(default=DEFAULT_TIME_FORMAT, description="strftime format")
    # e.g. GLYPHLOG_TEMPLATES='["{t}{s} {m}", "   {m}"]'
    templates: list[str] | None = Field(
        default=None, description="One to four record templates"
    )

    def to_config(self) -> LoggerConfig:
        """Convert to a LoggerConfig, resolving level names and templates."""
        return LoggerConfig(
            level=self.level,
            file_name=self.file_name,
            truncate=self.truncate,
            need_prefix=self.need_prefix,
            prefix=self.prefix,
            time_format=self.time_format,
            templates=TemplateSet.from_strings(*self.templates)
            if self.templates
            else None,
        )


@lru_cache
def get_settings() -> LoggerSettings:
    """
    Provides access to the default logger settings.

    Settings are loaded from environment variables or a .env file. The
    instance is cached, so later environment changes need
    ``get_settings.cache_clear()``.

    Returns:
        LoggerSettings: The settings instance.
    """
    return LoggerSettings()
