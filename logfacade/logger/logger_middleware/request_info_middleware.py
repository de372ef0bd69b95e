# logfacade/logger/logger_middleware/request_info_middleware.py
"""
Request context for error reports.

RequestInfoMiddleware records the current request in a context variable;
render_request_info() is the request-info callback that turns it into the
"Request:" section of an error report.

Usage Example:
    from fastapi import FastAPI
    from logfacade.logger.logger_middleware import RequestInfoMiddleware, render_request_info

    logger = DefaultLogger(request_info_callback=render_request_info)
    app = FastAPI()
    app.add_middleware(RequestInfoMiddleware, error_logger=logger)
"""

import uuid
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from logfacade.context_vars import request_info_context_var
from .middleware_types import RequestInfo

if TYPE_CHECKING:
    from ..logger import DefaultLogger


class RequestInfoMiddleware(BaseHTTPMiddleware):
    """
    Stores a RequestInfo for the duration of each request.

    When ``error_logger`` is given, exceptions escaping the application are
    passed to its log_throwable() while the request is still known, then
    re-raised.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        error_logger: Optional["DefaultLogger"] = None,
        log_client_info: bool = True,
    ):
        """
        Initialize request info middleware.

        Args:
            app: ASGI application
            error_logger: Logger receiving unhandled exceptions
            log_client_info: Whether to record client IP and User-Agent
        """
        super().__init__(app)
        self.error_logger = error_logger
        self.log_client_info = log_client_info

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        info = RequestInfo(
            method=request.method,
            url=str(request.url),
            request_id=request_id,
            client_host=(
                request.client.host if self.log_client_info and request.client else None
            ),
            user_agent=(
                request.headers.get("user-agent") if self.log_client_info else None
            ),
        )
        token = request_info_context_var.set(info)
        try:
            response = await call_next(request)
        except Exception as exc:
            if self.error_logger is not None:
                self.error_logger.log_throwable(exc, {"request_id": request_id})
            raise
        finally:
            request_info_context_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        return response


def render_request_info() -> str:
    """Request-info callback: the current request, or "" outside of one."""
    info = request_info_context_var.get()
    if info is None:
        return ""
    return info.render()


__all__ = ["RequestInfoMiddleware", "render_request_info"]
