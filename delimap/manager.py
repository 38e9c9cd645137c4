"""
Spreadsheet managers.

A manager holds one loaded document plus its parsing configuration and
recomputes separator and header on every accessor, so configuration changes
take effect on the next call.
"""

from __future__ import annotations

import abc
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .detect import resolve_separator
from .loader import read_lines, to_document
from .mapping import build_object_records, build_records, extract_header
from .models import ParseResult, RawDocument, Record, RecordView, StatusReport
from .rules import DEFAULT_CANDIDATES, DEFAULT_SAMPLE_SIZE

logger = logging.getLogger(__name__)


class SpreadsheetManager(abc.ABC):
    """Contract shared by every manager the factory can build."""

    @abc.abstractmethod
    def load(self, document: Iterable[str]) -> "SpreadsheetManager": ...

    @abc.abstractmethod
    def process_file(self, path: Union[str, Path]) -> "SpreadsheetManager": ...

    @abc.abstractmethod
    def get_header(self) -> List[str]: ...

    @abc.abstractmethod
    def get_records(self) -> List[Record]: ...

    @abc.abstractmethod
    def get_object_records(self) -> List[RecordView]: ...

    @abc.abstractmethod
    def get_separator(self) -> str: ...

    @abc.abstractmethod
    def get_status(self) -> StatusReport: ...

    @abc.abstractmethod
    def add_candidate(self, value: str) -> "SpreadsheetManager": ...

    @abc.abstractmethod
    def set_separator(self, value: Optional[str] = None) -> "SpreadsheetManager": ...

    @abc.abstractmethod
    def set_sample_size(self, n: int) -> "SpreadsheetManager": ...


class CsvManager(SpreadsheetManager):
    def __init__(self, candidates: Optional[Iterable[str]] = None, sample_size: int = DEFAULT_SAMPLE_SIZE) -> None:
        self._document: RawDocument = ()
        self._candidates: List[str] = list(DEFAULT_CANDIDATES if candidates is None else candidates)
        self._forced: Optional[str] = None
        self.set_sample_size(sample_size)

        self._separator: Optional[str] = None
        self._header: List[str] = []
        self._status = StatusReport()

    @property
    def candidates(self) -> List[str]:
        return list(self._candidates)

    @property
    def sample_size(self) -> int:
        return self._sample_size

    # --- configuration ---

    def load(self, document: Iterable[str]) -> "CsvManager":
        self._document = to_document(document)
        return self

    def process_file(self, path: Union[str, Path]) -> "CsvManager":
        """Load ``path`` if it is an existing regular file; otherwise keep the current document."""
        path = Path(path)
        if not path.is_file():
            logger.warning("Ignoring %s: not an existing file", path)
            return self
        return self.load(read_lines(path))

    def add_candidate(self, value: str) -> "CsvManager":
        self._candidates.append(value)
        return self

    def set_separator(self, value: Optional[str] = None) -> "CsvManager":
        self._forced = value or None
        return self

    def set_sample_size(self, n: int) -> "CsvManager":
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"sample size must be a positive integer, got {n!r}")
        self._sample_size = n
        return self

    # --- pipeline ---

    def _recompute(self) -> None:
        if self._forced:
            self._separator = self._forced
            self._status = StatusReport()
        else:
            result = resolve_separator(self._document, self._candidates, self._sample_size)
            self._separator = result.separator
            self._status = result.status

        self._header = extract_header(self._document, self._separator)

    def _data_lines(self) -> RawDocument:
        if len(self._document) < 2:
            return ()
        return self._document[1:]

    # --- accessors ---

    def get_header(self) -> List[str]:
        self._recompute()
        return list(self._header)

    def get_records(self) -> List[Record]:
        self._recompute()
        return build_records(self._data_lines(), self._header, self._separator)

    def get_object_records(self) -> List[RecordView]:
        self._recompute()
        return build_object_records(self._data_lines(), self._header, self._separator)

    def get_separator(self) -> str:
        self._recompute()
        return self._separator or ""

    def get_status(self) -> StatusReport:
        return self._status.model_copy()

    def parse(self) -> ParseResult:
        """Run the whole pipeline once and return everything with its own status."""
        self._recompute()
        return ParseResult(
            separator=self._separator,
            header=list(self._header),
            records=build_records(self._data_lines(), self._header, self._separator),
            status=self._status.model_copy(),
        )
