# logfacade/api_error/ApiError.py
import uuid
from datetime import datetime


def generate_reference_code() -> str:
    """Timestamp plus six random hex characters, e.g. ``20240110134501a3f9c2``."""
    return datetime.now().strftime("%Y%m%d%H%M%S") + uuid.uuid4().hex[:6]


class AppError(Exception):
    """
    Base error for all application-specific issues.

    Carries a reference code so the persisted error report and the log
    line pointing to it can be correlated.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: int = 0,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.reference_code = generate_reference_code()
        super().__init__(self.message)


__all__ = ["AppError", "generate_reference_code"]
