from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Iterable, Union

from .models import RawDocument
from .rules import TEXT_ENCODING

logger = logging.getLogger(__name__)


def to_document(lines: Union[str, Iterable[str]]) -> RawDocument:
    if isinstance(lines, str):
        return split_text(lines)
    return tuple(lines)


def split_text(text: str) -> RawDocument:
    """Split decoded text into lines, keeping each line's terminator."""
    return tuple(io.StringIO(text, newline=""))


def read_lines(path: Union[str, Path], encoding: str = TEXT_ENCODING) -> RawDocument:
    """
    Read a text file into a document.

    No encoding detection is attempted: the file is decoded with ``encoding``
    and decoding errors propagate to the caller.
    """
    path = Path(path)
    with path.open("r", encoding=encoding, newline="") as fh:
        document = split_text(fh.read())
    logger.info("Loaded %d lines from %s", len(document), path)
    return document
