# logfacade/logger/backtrace.py
"""Plain-text backtrace rendering used when no other renderer is injected."""

from typing import Callable, Sequence
from .throwable import StackFrame

BacktraceRenderer = Callable[[Sequence[StackFrame]], str]


def render_frame(index: int, frame: StackFrame) -> str:
    """Render one frame, e.g. ``#0 shop.billing.Invoice.pay() at shop/billing.py:42``."""
    function = frame.function or "{unknown}"
    callee = f"{frame.class_name}.{function}" if frame.class_name else function
    location = ""
    if frame.file is not None:
        location = f" at {frame.file}"
        if frame.line is not None:
            location += f":{frame.line}"
    return f"#{index} {callee}(){location}"


def render_backtrace_plain(frames: Sequence[StackFrame]) -> str:
    """Render frames innermost first, one per line, newline terminated."""
    return "".join(f"{render_frame(index, frame)}\n" for index, frame in enumerate(frames))


__all__ = ["BacktraceRenderer", "render_backtrace_plain", "render_frame"]
