"""Call-site capture for assertion source locations."""

from __future__ import annotations

import inspect
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    file_path: str
    line_number: int


def caller_location(depth: int = 1) -> SourceLocation:
    """Return the file and line of the frame `depth` levels above the caller.

    depth=1 is the function that called the function calling this helper,
    which is what an operator like `is_equal_to()` wants for its own caller.
    """
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(depth):
            if target is None:
                break
            target = target.f_back
        if target is None:
            return SourceLocation("<unknown>", 0)
        return SourceLocation(target.f_code.co_filename, target.f_lineno)
    finally:
        # A held frame keeps the caller's assertions alive past their scope.
        del frame


def caller_line(depth: int = 1) -> int:
    return caller_location(depth + 1).line_number
