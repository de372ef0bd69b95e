# logfacade/api_error/logger_error.py
class LoggerError(RuntimeError):
    """Base error for misuse of the logging facade."""

    pass


class UnknownBackendError(LoggerError):
    """
    Raised when removing a backend that was never registered.

    Signals a configuration mistake in the caller, nothing to retry.
    """

    def __init__(self, message: str = "Backend is unknown to this logger.", code: int = 1229430381):
        self.message = message
        self.code = code
        super().__init__(self.message)


__all__ = ["LoggerError", "UnknownBackendError"]
