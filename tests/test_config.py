import pytest

from glyphlog.config import DEFAULT_TIME_FORMAT, LoggerConfig, LoggerSettings, get_settings
from glyphlog.exceptions import ConfigurationError
from glyphlog.levels import Severity
from glyphlog.template import TemplateSet


def test_logger_config_defaults():
    config = LoggerConfig()
    assert config.level == Severity.VERBOSE
    assert config.file_name == ""
    assert config.truncate is False
    assert config.need_prefix is True
    assert config.prefix == ""
    assert config.time_format == DEFAULT_TIME_FORMAT
    assert config.templates is None


def test_logger_config_parses_level_names():
    assert LoggerConfig(level="debug").level == Severity.DEBUG
    config = LoggerConfig()
    config.level = 1
    assert config.level == Severity.WARN


def test_logger_config_rejects_unknown_level():
    config = LoggerConfig()
    with pytest.raises(ConfigurationError):
        config.level = "chatty"
    assert config.level == Severity.VERBOSE


def test_settings_defaults(monkeypatch):
    for name in ("LEVEL", "FILE_NAME", "TEMPLATES", "PREFIX"):
        monkeypatch.delenv(f"GLYPHLOG_{name}", raising=False)
    config = LoggerSettings(_env_file=None).to_config()
    assert config == LoggerConfig()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GLYPHLOG_LEVEL", "Info")
    monkeypatch.setenv("GLYPHLOG_PREFIX", "svc: ")
    monkeypatch.setenv("GLYPHLOG_NEED_PREFIX", "false")
    monkeypatch.setenv("GLYPHLOG_TIME_FORMAT", "%H:%M ")
    monkeypatch.setenv("GLYPHLOG_TEMPLATES", '["F{m}", "M{m}"]')

    config = LoggerSettings(_env_file=None).to_config()

    assert config.level == Severity.INFO
    assert config.prefix == "svc: "
    assert config.need_prefix is False
    assert config.time_format == "%H:%M "
    assert config.templates == TemplateSet(first="F{m}", mid="M{m}", last="M{m}", single="F{m}")


def test_settings_with_invalid_level_fail_on_conversion(monkeypatch):
    monkeypatch.setenv("GLYPHLOG_LEVEL", "shouty")
    with pytest.raises(ConfigurationError):
        LoggerSettings(_env_file=None).to_config()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_settings_accept_numeric_level(monkeypatch):
    monkeypatch.setenv("GLYPHLOG_LEVEL", "3")
    assert LoggerSettings(_env_file=None).to_config().level == Severity.DEBUG
