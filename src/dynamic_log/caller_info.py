from __future__ import annotations

import inspect
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CallerInfo:
    """
    Source location of the code that asked for a log entry.
    """

    filename: str    # Base name of the source file
    function: str    # Enclosing routine, "<module>" at top level
    lineno: int      # Line of the call

    def __str__(self) -> str:
        return f"{self.filename} {self.function} {self.lineno}"


UNKNOWN_CALLER = CallerInfo(filename="?", function="?", lineno=0)


def capture_caller(stacklevel: int = 1) -> CallerInfo:
    """
    Describe a frame above the current one.

    stacklevel=1 is the function calling capture_caller; each extra level
    moves one frame up. A stack shallower than requested yields the
    outermost frame.
    """

    frame = inspect.currentframe()
    target = frame.f_back if frame is not None else None
    try:
        if target is None:
            return UNKNOWN_CALLER
        for _ in range(stacklevel - 1):
            if target.f_back is None:
                break
            target = target.f_back

        code = target.f_code
        return CallerInfo(
            filename=os.path.basename(code.co_filename),
            function=getattr(code, "co_qualname", code.co_name),
            lineno=target.f_lineno,
        )
    finally:
        # Frames hold references to their locals
        del frame
        del target
