"""Tests for template resolution and record formatting."""

from datetime import datetime

import pytest

from glyphlog.config import LoggerConfig
from glyphlog.exceptions import ConfigurationError
from glyphlog.levels import Severity
from glyphlog.template import TemplateSet, default_templates, format_record, join_message

NOW = datetime(2024, 5, 17, 9, 30, 15)


def make_config(*templates: str, **overrides) -> LoggerConfig:
    return LoggerConfig(
        templates=TemplateSet.from_strings(*templates) if templates else None,
        **overrides,
    )


def test_from_strings_single_template_fills_every_slot():
    ts = TemplateSet.from_strings("A{m}")
    assert (ts.first, ts.mid, ts.last, ts.single) == ("A{m}", "A{m}", "A{m}", "A{m}")


def test_from_strings_mid_covers_last():
    ts = TemplateSet.from_strings("F", "M")
    assert (ts.first, ts.mid, ts.last, ts.single) == ("F", "M", "M", "F")


def test_from_strings_three_templates():
    ts = TemplateSet.from_strings("F", "M", "L")
    assert (ts.first, ts.mid, ts.last, ts.single) == ("F", "M", "L", "F")


def test_from_strings_explicit_single():
    ts = TemplateSet.from_strings("F", "M", "L", "S")
    assert (ts.first, ts.mid, ts.last, ts.single) == ("F", "M", "L", "S")


@pytest.mark.parametrize("templates", [(), ("1", "2", "3", "4", "5")])
def test_from_strings_rejects_bad_counts(templates):
    with pytest.raises(ConfigurationError):
        TemplateSet.from_strings(*templates)


def test_join_message_has_no_separator():
    assert join_message(("count=", 3, " ok=", True)) == "count=3 ok=True"
    assert join_message(()) == ""


def test_single_line_uses_single_template():
    config = make_config("F {m}", "M {m}", "L {m}", "S {m}")
    record = format_record(("hello",), Severity.INFO, config, "", 0, NOW)
    assert record.file == "S hello"


@pytest.mark.parametrize("count", [2, 3, 5])
def test_multi_line_template_selection(count):
    config = make_config("F {m}", "M {m}", "L {m}", "S {m}")
    message = "\n".join(str(i) for i in range(count))
    lines = format_record((message,), Severity.WARN, config, "", 0, NOW).file.split("\n")

    assert len(lines) == count
    assert lines[0] == "F 0"
    assert lines[-1] == f"L {count - 1}"
    assert lines[1:-1] == [f"M {i}" for i in range(1, count - 1)]


def test_empty_message_still_renders_template():
    config = make_config("{s1}|{m}|")
    record = format_record((), Severity.DEBUG, config, "", 0, NOW)
    assert record.file == "D||"
    assert record.console == "D||"


def test_severity_placeholders():
    config = make_config("{s}-{s0}-{s1}-{s2}")
    record = format_record(("x",), Severity.ERROR, config, "", 0, NOW)
    assert record.console == "\033[31mE\033[0m-\033[31m-E-\033[0m"
    assert record.file == "E--E-"


def test_prefix_glyph_scenario():
    config = make_config("{p}{s1}{s1}: {m}", prefix="test: ")
    record = format_record(("hello",), Severity.INFO, config, "", 0, NOW)
    assert record.console == "test: II: hello"
    assert record.file == "test: II: hello"


def test_time_and_caller_placeholders():
    config = make_config("{t}{f}:{l} {m}", time_format="%H:%M:%S ")
    record = format_record(("go",), Severity.INFO, config, "pkg/mod.py", 42, NOW)
    assert record.file == "09:30:15 pkg/mod.py:42 go"


def test_caller_file_is_made_relative(monkeypatch):
    monkeypatch.setattr("glyphlog.stack.STARTUP_CWD", "/srv/app")
    config = make_config("{f}")
    record = format_record(("",), Severity.INFO, config, "/srv/app/jobs/run.py", 7, NOW)
    assert record.file == "jobs/run.py"


def test_block_placeholders_expand_inside_message():
    config = make_config("{m}")
    record = format_record(("at {f}:{l}",), Severity.ERROR, config, "a.py", 3, NOW)
    assert record.file == "at a.py:3"


def test_box_drawing_templates():
    config = make_config(
        "{s}[{t}]{s0}{p} ┬─{m}{s2}",
        "               {s0} ├─{m}{s2}",
        "               {s0} └─{m}{s2}",
        "{s}[{t}]{s0}{p} ──{m}{s2}",
        prefix="test",
        time_format="%H:%M:%S",
    )
    block = format_record(("1\n2\n3",), Severity.INFO, config, "", 0, NOW)
    assert block.file.split("\n") == [
        "I[09:30:15]test ┬─1",
        " " * 15 + " ├─2",
        " " * 15 + " └─3",
    ]
    single = format_record(("1",), Severity.INFO, config, "", 0, NOW)
    assert single.file == "I[09:30:15]test ──1"
    assert single.console.startswith("\033[34mI\033[0m[09:30:15]\033[34mtest")


def test_default_templates_with_prefix():
    config = make_config(prefix="app ", time_format="[%Y] ")
    record = format_record(("one\ntwo",), Severity.WARN, config, "", 0, NOW)
    assert record.file == "[2024] app W: one\napp W: two"


def test_default_templates_without_prefix():
    config = make_config(prefix="app ", time_format="[%Y] ", need_prefix=False)
    record = format_record(("one\ntwo",), Severity.WARN, config, "", 0, NOW)
    assert record.file == "[2024] app one\napp two"
    assert default_templates(False).single == "{t}{p}{m}"
