# logfacade/logger/error_renderer.py
"""
Post-mortem rendering of errors and their cause chains.

Usage:
    renderer = ErrorRenderer(request_info_callback=render_request_info)
    report = renderer.render_error_info(exc)
"""

from typing import Callable, Optional, Sequence
from .backtrace import BacktraceRenderer, render_backtrace_plain
from .throwable import StackFrame, Throwable, as_throwable

MAXIMUM_CHAINING_DEPTH = 100
MAXIMUM_DEPTH_NOTICE = "Maximum chaining depth reached ..."
PREVIOUS_EXCEPTION_PREFIX = "Previous exception: "

RequestInfoCallback = Callable[[], str]


class ErrorRenderer:
    """
    Builds the text persisted for an error: its message and backtrace,
    then the same for every previous error, then the current request info.
    """

    def __init__(
        self,
        render_backtrace_callback: BacktraceRenderer = render_backtrace_plain,
        request_info_callback: Optional[RequestInfoCallback] = None,
        maximum_depth: int = MAXIMUM_CHAINING_DEPTH,
    ) -> None:
        self.render_backtrace_callback = render_backtrace_callback
        self.request_info_callback = request_info_callback
        self.maximum_depth = maximum_depth

    def get_error_log_message(self, error: object) -> str:
        """
        One-line summary, e.g. ``Exception #42 in line 10 of a.txt: boom``.

        The code is shown only when positive, the location only when the
        first frame knows its line.
        """
        throwable = as_throwable(error)
        error_code = f" #{throwable.code}" if throwable.code > 0 else ""
        trace = throwable.trace
        line = ""
        if trace and trace[0].line is not None:
            line = f" in line {trace[0].line} of {trace[0].file}"
        return f"Exception{error_code}{line}: {throwable.message}"

    def render_error_info(self, error: object) -> str:
        """Render the full report for an error and its previous errors."""
        throwable: Throwable = as_throwable(error)
        post_mortem_info = (
            self.get_error_log_message(throwable)
            + "\n\n"
            + self.render_backtrace(throwable.trace)
        )

        depth = 0
        while throwable.previous is not None and depth < self.maximum_depth:
            throwable = as_throwable(throwable.previous)
            message = PREVIOUS_EXCEPTION_PREFIX + self.get_error_log_message(throwable)
            post_mortem_info += "\n" + message + "\n\n" + self.render_backtrace(throwable.trace)
            depth += 1

        post_mortem_info += self.render_request_info()

        # Only flag chains that were actually cut short
        if depth == self.maximum_depth and throwable.previous is not None:
            post_mortem_info += "\n" + MAXIMUM_DEPTH_NOTICE

        return post_mortem_info

    def render_backtrace(self, trace: Sequence[StackFrame]) -> str:
        return self.render_backtrace_callback(trace)

    def render_request_info(self) -> str:
        """Render information about the current request, if possible."""
        if self.request_info_callback is None:
            return ""
        return self.request_info_callback()


__all__ = [
    "ErrorRenderer",
    "RequestInfoCallback",
    "MAXIMUM_CHAINING_DEPTH",
    "MAXIMUM_DEPTH_NOTICE",
    "PREVIOUS_EXCEPTION_PREFIX",
]
