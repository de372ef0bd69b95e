# logfacade/logger/throwable.py
"""
Uniform view of errors for rendering and persistence.

Anything that exposes ``message``, ``code``, ``trace``, ``previous`` and
``reference_code`` can be logged. Python exceptions are wrapped in
ExceptionAdapter, which reads the traceback and the cause/context chain.
"""

from dataclasses import dataclass
from types import FrameType, TracebackType
from typing import Any, List, Optional, Protocol, Sequence, Tuple, Union


@dataclass(frozen=True)
class StackFrame:
    """A single frame of an error's trace. Every field may be unknown."""

    file: Optional[str] = None
    line: Optional[int] = None
    function: Optional[str] = None
    class_name: Optional[str] = None


class Throwable(Protocol):
    """Capability shared by every loggable error."""

    @property
    def message(self) -> str: ...

    @property
    def code(self) -> int: ...

    @property
    def trace(self) -> Sequence[StackFrame]:
        """Frames ordered innermost first."""
        ...

    @property
    def previous(self) -> Optional["Throwable"]: ...

    @property
    def reference_code(self) -> Optional[str]: ...


def describe_frame(frame: FrameType) -> Tuple[str, str]:
    """
    Get (class_name, method_name) for a live frame.

    Methods resolve to ``<module>.<ClassQualname>``; module level functions
    resolve to the module name.
    """
    code = frame.f_code
    module_name = frame.f_globals.get("__name__", "")
    if code.co_argcount > 0:
        first_arg = code.co_varnames[0]
        owner = frame.f_locals.get(first_arg)
        if first_arg == "self" and owner is not None:
            owner = type(owner)
        if first_arg in ("self", "cls") and isinstance(owner, type):
            return f"{owner.__module__}.{owner.__qualname__}", code.co_name
    return module_name, code.co_name


def package_key_from(class_name: Optional[str]) -> Optional[str]:
    """Second segment of a dotted name, e.g. ``billing`` for ``shop.billing.Invoice``."""
    if not class_name:
        return None
    segments = class_name.split(".")
    return segments[1] if len(segments) > 1 else None


def frames_from_traceback(tb: Optional[TracebackType]) -> List[StackFrame]:
    """Convert a traceback into StackFrames, innermost first."""
    frames: List[StackFrame] = []
    while tb is not None:
        class_name, function = describe_frame(tb.tb_frame)
        frames.append(
            StackFrame(
                file=tb.tb_frame.f_code.co_filename,
                line=tb.tb_lineno,
                function=function,
                class_name=class_name,
            )
        )
        tb = tb.tb_next
    frames.reverse()
    return frames


class ExceptionAdapter:
    """Presents a Python exception as a Throwable."""

    def __init__(self, exception: BaseException) -> None:
        self.exception = exception
        self._trace: Optional[List[StackFrame]] = None

    @property
    def message(self) -> str:
        message = getattr(self.exception, "message", None)
        if isinstance(message, str):
            return message
        return str(self.exception)

    @property
    def code(self) -> int:
        code = getattr(self.exception, "code", 0)
        if isinstance(code, int) and not isinstance(code, bool):
            return code
        return 0

    @property
    def trace(self) -> Sequence[StackFrame]:
        if self._trace is None:
            self._trace = frames_from_traceback(self.exception.__traceback__)
        return self._trace

    @property
    def previous(self) -> Optional["ExceptionAdapter"]:
        previous = self.exception.__cause__
        if previous is None and not self.exception.__suppress_context__:
            previous = self.exception.__context__
        return ExceptionAdapter(previous) if previous is not None else None

    @property
    def reference_code(self) -> Optional[str]:
        reference_code = getattr(self.exception, "reference_code", None)
        return reference_code if isinstance(reference_code, str) else None

    def __repr__(self) -> str:
        return f"ExceptionAdapter({self.exception!r})"


def as_throwable(error: Union[BaseException, Throwable, Any]) -> Throwable:
    """Wrap Python exceptions; pass anything else through unchanged."""
    if isinstance(error, BaseException):
        return ExceptionAdapter(error)
    return error


__all__ = [
    "StackFrame",
    "Throwable",
    "ExceptionAdapter",
    "as_throwable",
    "describe_frame",
    "frames_from_traceback",
    "package_key_from",
]
