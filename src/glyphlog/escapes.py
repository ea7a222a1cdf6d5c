# glyphlog/escapes.py
"""ANSI escape stripping for file output."""

import re

_ESCAPE_RE = re.compile(r"\x1b\[\d+m")


def strip_escapes(text: str) -> str:
    """Remove every ``ESC [ <digits> m`` color sequence from ``text``."""
    return _ESCAPE_RE.sub("", text)
