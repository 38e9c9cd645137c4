from .detect import resolve_separator
from .errors import DelimapError, UnsupportedFormatError
from .factory import SUPPORTED_EXTENSIONS, get_manager
from .loader import read_lines, split_text
from .manager import CsvManager, SpreadsheetManager
from .mapping import build_object_records, build_records, extract_header, split_line
from .models import ParseResult, RecordView, SeparatorResult, StatusReport

__all__ = [
    "CsvManager",
    "DelimapError",
    "ParseResult",
    "RecordView",
    "SUPPORTED_EXTENSIONS",
    "SeparatorResult",
    "SpreadsheetManager",
    "StatusReport",
    "UnsupportedFormatError",
    "build_object_records",
    "build_records",
    "extract_header",
    "get_manager",
    "read_lines",
    "resolve_separator",
    "split_line",
    "split_text",
]
