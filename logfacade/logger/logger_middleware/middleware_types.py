# logfacade/logger/logger_middleware/middleware_types.py
"""
Type definitions for the request info middleware.
"""

from typing import Optional
from pydantic import BaseModel, Field


class RequestInfo(BaseModel):
    """
    Snapshot of the request being handled, rendered into error reports.
    """

    method: str = Field(..., description="HTTP method (GET, POST, etc.)")
    url: str = Field(..., description="Full request URL")
    request_id: str = Field(..., description="Unique request ID")
    client_host: Optional[str] = Field(None, description="Client IP address")
    user_agent: Optional[str] = Field(None, description="User-Agent header")

    model_config = {"frozen": True}

    def render(self) -> str:
        lines = [
            "",
            "",
            "Request:",
            f"  {self.method} {self.url}",
            f"  Request ID: {self.request_id}",
        ]
        if self.client_host:
            lines.append(f"  Client: {self.client_host}")
        if self.user_agent:
            lines.append(f"  User-Agent: {self.user_agent}")
        return "\n".join(lines) + "\n"


__all__ = ["RequestInfo"]
