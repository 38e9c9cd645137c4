from __future__ import annotations

from typing import Callable, Dict

from .errors import UnsupportedFormatError
from .manager import CsvManager, SpreadsheetManager

_MANAGERS: Dict[str, Callable[[], SpreadsheetManager]] = {
    ".csv": CsvManager,
}

SUPPORTED_EXTENSIONS = tuple(_MANAGERS)


def normalize_extension(extension: str) -> str:
    ext = extension.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def get_manager(extension: str) -> SpreadsheetManager:
    """Build the manager registered for ``extension`` (e.g. ``".csv"``)."""
    factory = _MANAGERS.get(normalize_extension(extension))
    if factory is None:
        raise UnsupportedFormatError(extension)
    return factory()
