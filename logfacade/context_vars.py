# logfacade/context_vars.py
from contextvars import ContextVar
from typing import Optional, Any

# Request being handled by the current task, set by RequestInfoMiddleware
request_info_context_var: ContextVar[Optional[Any]] = ContextVar(
    "request_info",
    default=None,
)

__all__ = ["request_info_context_var"]
