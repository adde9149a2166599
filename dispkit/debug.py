"""
Dispkit Debug Tools
"""

# Standard library -----------------------------------------------------------------------------------------------------
import inspect
import sys
import traceback
from typing import IO


# Methods --------------------------------------------------------------------------------------------------------------

def stack_trace(skip: int = 0) -> str:
    """
    Return the caller's stack as 'Stack trace:' followed by frames indented by four spaces.

    The frame of stack_trace() itself is not included; skip drops that many more
    innermost frames.
    """
    frame = inspect.currentframe().f_back
    for _ in range(skip):
        if frame.f_back is None:
            break
        frame = frame.f_back

    lines = "".join(traceback.format_stack(frame)).rstrip("\n").split("\n")
    return "Stack trace:\n" + "\n".join("    " + line for line in lines)


def print_stack_trace(file: IO[str] | None = None) -> None:
    """Write stack_trace() of the caller to file, sys.stderr by default."""
    print(stack_trace(skip=1), file=file if file is not None else sys.stderr)
