# logfacade/scripts/get_project_root.py
import inspect
from pathlib import Path
from typing import Optional


def get_project_root(start: Optional[Path] = None) -> Path:
    """
    Get the directory holding the outermost package of a module.

    Walks up from ``start`` (default: the calling module's directory) until
    it reaches a directory without an __init__.py file.

    Example:
        Called from /project/logfacade/logger/log_backends/file_backend.py:
        - /project/logfacade/logger/log_backends/ (has __init__.py, continue)
        - /project/logfacade/logger/ (has __init__.py, continue)
        - /project/logfacade/ (has __init__.py, continue)
        - /project/ (no __init__.py, return this)
    """
    if start is None:
        frame = inspect.currentframe()
        caller_frame = frame.f_back if frame is not None else None
        caller_file = caller_frame.f_globals.get("__file__") if caller_frame else None
        if not caller_file:
            return Path.cwd()
        start = Path(caller_file).resolve().parent

    current_path = start
    while current_path != current_path.parent:
        if not (current_path / "__init__.py").exists():
            return current_path
        current_path = current_path.parent

    return start


__all__ = ["get_project_root"]
