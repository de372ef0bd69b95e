# logfacade/logger/persistence.py
"""
Synchronous persistence of rendered error reports.

Reports land in ``<storage_root>/Logs/Exceptions/<reference_code>.txt``.
Every failure is reported by returning None; the caller decides how to
log it, so persisting an error report never raises.
"""

import os
from pathlib import Path
from typing import Optional

from logfacade.api_error import generate_reference_code
from logfacade.config.structlog_config import get_logger

EXCEPTIONS_SUBDIRECTORY = Path("Logs") / "Exceptions"

_logger = get_logger(__name__)


class ErrorPersistence:
    """
    Writes error reports below a configured storage root.

    Without a storage root nothing is ever written.
    """

    def __init__(self, storage_root: Optional[Path] = None) -> None:
        self.storage_root = Path(storage_root) if storage_root is not None else None

    @property
    def exceptions_directory(self) -> Optional[Path]:
        """Directory receiving the reports, None when persistence is off."""
        if self.storage_root is None:
            return None
        return self.storage_root / EXCEPTIONS_SUBDIRECTORY

    def ensure_directory(self) -> bool:
        """
        Create the reports directory if missing.

        Returns:
            True if the directory exists, is a directory and is writable
        """
        directory = self.exceptions_directory
        if directory is None:
            return False

        if not directory.exists():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                _logger.debug(
                    "Could not create error report directory",
                    path=str(directory),
                    error=str(e),
                )

        return directory.is_dir() and os.access(directory, os.W_OK)

    def persist(self, report: str, reference_code: Optional[str] = None) -> Optional[str]:
        """
        Write a report file.

        Args:
            report: Rendered error report
            reference_code: File stem; generated from time and random bytes if omitted

        Returns:
            Name of the written file, or None if it could not be written
        """
        if not self.ensure_directory():
            return None

        directory = self.exceptions_directory
        if directory is None:
            return None
        file_path = directory / f"{reference_code or generate_reference_code()}.txt"

        try:
            file_path.write_text(report, encoding="utf-8")
        except (OSError, ValueError) as e:
            _logger.debug("Could not write error report", path=str(file_path), error=str(e))
            # Drop whatever part of the report made it to disk
            try:
                file_path.unlink(missing_ok=True)
            except OSError as cleanup_error:
                _logger.debug(
                    "Could not remove partial error report",
                    path=str(file_path),
                    error=str(cleanup_error),
                )
            return None

        return file_path.name

    def failure_message(self) -> str:
        """Warning logged in place of a report that could not be written."""
        directory = self.exceptions_directory
        target = f"{directory}{os.sep}" if directory is not None else "an unconfigured storage root"
        return (
            f"Could not write exception backtrace into {target} because the "
            f"directory could not be created or is not writable."
        )


__all__ = ["ErrorPersistence", "EXCEPTIONS_SUBDIRECTORY"]
