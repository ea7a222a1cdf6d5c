# glyphlog/stack.py
"""Call-stack introspection for caller locations and error stacks.

Both helpers walk ``sys._getframe`` outward from their own caller. Frame
depths are relative: ``depth=0`` in :func:`caller_location` and
``skip_frames=0`` in :func:`capture_stack` both mean "the function that
called me". Introspection is best-effort; when frames are unavailable the
helpers return empty results instead of raising.
"""

import os
import sys
from types import FrameType

from pydantic import BaseModel, ConfigDict

# Working directory at import time, used to shorten {f} paths.
STARTUP_CWD = os.getcwd().replace("\\", "/")

DEFAULT_MAX_FRAMES = 10


class StackFrame(BaseModel):
    """One entry of a captured call stack."""

    model_config = ConfigDict(frozen=True)

    function: str
    file: str
    line: int

    def __str__(self) -> str:
        return f"at {self.function} in {self.file}:{self.line}"


def _frame_at(depth: int) -> FrameType | None:
    # +2 skips _frame_at itself and the public helper that called it.
    try:
        return sys._getframe(depth + 2)
    except ValueError:
        return None


def caller_location(depth: int = 0) -> tuple[str, int]:
    """Return ``(file, line)`` of the frame ``depth`` levels above the caller.

    The file is made relative to :data:`STARTUP_CWD`, with separators
    normalized to ``/`` and no leading separator. Returns ``("", 0)`` when the
    stack is shallower than requested.
    """
    frame = _frame_at(depth)
    if frame is None:
        return "", 0
    return relative_path(frame.f_code.co_filename), frame.f_lineno


def relative_path(path: str) -> str:
    path = path.replace("\\", "/")
    prefix = STARTUP_CWD.rstrip("/") + "/"
    if path.startswith(prefix):
        path = path[len(prefix) :]
    return path.lstrip("/")


def capture_stack(
    skip_frames: int = 0, max_frames: int = DEFAULT_MAX_FRAMES
) -> list[StackFrame]:
    """Capture up to ``max_frames`` frames, innermost first.

    Args:
        skip_frames: Frames to skip above the caller of this function.
        max_frames: Upper bound on the number of returned frames.

    Returns:
        list[StackFrame]: Entries naming the module-qualified function, the
            absolute source file and the current line of each frame.
    """
    frames: list[StackFrame] = []
    frame = _frame_at(skip_frames)
    while frame is not None and len(frames) < max_frames:
        module = frame.f_globals.get("__name__", "")
        function = frame.f_code.co_qualname
        frames.append(
            StackFrame(
                function=f"{module}.{function}" if module else function,
                file=frame.f_code.co_filename.replace("\\", "/"),
                line=frame.f_lineno,
            )
        )
        frame = frame.f_back
    return frames


def format_stack(frames: list[StackFrame]) -> str:
    """Render frames as ``at <function> in <file>:<line>`` lines."""
    return "\n".join(str(frame) for frame in frames)
