# logfacade/logger/logger_middleware/__init__.py
from .middleware_types import RequestInfo
from .request_info_middleware import RequestInfoMiddleware, render_request_info

__all__ = ["RequestInfo", "RequestInfoMiddleware", "render_request_info"]
