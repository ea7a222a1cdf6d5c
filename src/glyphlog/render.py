# glyphlog/render.py
"""Text helpers for logging values that have no useful ``str()``.

``render_struct`` prints an object as a compact field listing and drops the
fields and nested blocks that came out empty. ``render_hex`` prints a byte
string as a bracketed list of hex pairs.
"""

import dataclasses
import re
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

_EMPTY_BLOCKS_RE = re.compile(r"\{\s*\}|\[\s*\]|\s{2,}")
_EMPTY_FIELD_BEFORE_CLOSE_RE = re.compile(r"\s*\w+:\}")
_EMPTY_FIELD_AFTER_OPEN_RE = re.compile(r"\{\w+: ")
_EMPTY_FIELD_MID_RE = re.compile(r"\s\w+:\s")

_REWRITES: tuple[tuple[re.Pattern[str], str], ...] = (
    (_EMPTY_BLOCKS_RE, ""),
    (_EMPTY_FIELD_BEFORE_CLOSE_RE, "}"),
    (_EMPTY_FIELD_AFTER_OPEN_RE, "{"),
    (_EMPTY_FIELD_MID_RE, " "),
)


def render_struct(value: Any) -> str:
    """Render ``value`` field by field with empty fields collapsed.

    Example:
        A dataclass ``B(a="", b=None, c=A(a=1, b="test"))`` renders as
        ``{b:<nil> c:{a:1 b:test}}``: the empty string field ``a`` vanishes
        together with its label.
    """
    return collapse_empty_fields(_describe(value))


def collapse_empty_fields(text: str) -> str:
    """Apply the empty-field rewrites until none of them matches."""
    while any(pattern.search(text) for pattern, _ in _REWRITES):
        for pattern, replacement in _REWRITES:
            text = pattern.sub(replacement, text)
    return text


def render_hex(data: bytes | bytearray | memoryview) -> str:
    """Render bytes as ``[00 1f ff]``; empty input gives ``[]``."""
    return "[" + " ".join(f"{b:02x}" for b in bytes(data)) + "]"


def _describe(value: Any, active: frozenset[int] = frozenset()) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "[" + " ".join(str(b) for b in bytes(value)) + "]"
    # Objects on the current path render as <cycle> instead of recursing.
    if id(value) in active:
        return "<cycle>"
    inner = active | {id(value)}
    if isinstance(value, BaseModel):
        return _fields(
            ((name, getattr(value, name)) for name in type(value).model_fields),
            inner,
        )
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _fields(
            ((f.name, getattr(value, f.name)) for f in dataclasses.fields(value)),
            inner,
        )
    if isinstance(value, Mapping):
        items = " ".join(
            f"{_describe(k, inner)}:{_describe(v, inner)}" for k, v in value.items()
        )
        return f"map[{items}]"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + " ".join(_describe(v, inner) for v in value) + "]"
    # Only objects without their own repr; classes, enums and functions
    # fall through to str().
    if hasattr(value, "__dict__") and type(value).__repr__ is object.__repr__:
        return _fields(
            ((name, v) for name, v in vars(value).items() if not name.startswith("_")),
            inner,
        )
    return str(value)


def _fields(pairs: Iterable[tuple[str, Any]], active: frozenset[int]) -> str:
    return "{" + " ".join(f"{name}:{_describe(v, active)}" for name, v in pairs) + "}"
