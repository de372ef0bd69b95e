import sys
from pathlib import Path
from typing import Any, List, Mapping, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from logfacade.config import Severity  # noqa: E402
from logfacade.logger import DefaultLogger, LogBackend  # noqa: E402


class RecordingBackend(LogBackend):
    """Backend keeping every call in memory."""

    def __init__(self, **config: Any):
        super().__init__(**config)
        self.entries: List[tuple] = []
        self.open_calls = 0
        self.close_calls = 0

    @property
    def name(self) -> str:
        return self.config.get("name", "recording")

    def open(self) -> None:
        self.open_calls += 1

    def append(
        self,
        message: str,
        severity: Severity = Severity.INFO,
        extra_data: Optional[Mapping[str, Any]] = None,
        package_key: Optional[str] = None,
        class_name: Optional[str] = None,
        method_name: Optional[str] = None,
    ) -> None:
        self.entries.append(
            (message, severity, extra_data, package_key, class_name, method_name)
        )

    def close(self) -> None:
        self.close_calls += 1

    @property
    def messages(self) -> List[str]:
        return [entry[0] for entry in self.entries]


@pytest.fixture
def backend():
    """Create a recording backend."""
    return RecordingBackend()


@pytest.fixture
def logger(backend):
    """Create a logger with one recording backend added."""
    default_logger = DefaultLogger()
    default_logger.add_backend(backend)
    yield default_logger
    default_logger.shutdown()
