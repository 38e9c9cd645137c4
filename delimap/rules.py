"""
Delimiter inference rules.

Candidate order is priority order: the first candidate that is consistent
across the sampled lines wins.
"""

DEFAULT_CANDIDATES = (";", ",", "\t", " ")
DEFAULT_SAMPLE_SIZE = 10

QUOTE_CHAR = '"'
TEXT_ENCODING = "utf-8-sig"  # strips a UTF-8 BOM if present

MSG_TOO_FEW_LINES = "document has fewer than two lines"
MSG_SEPARATOR_NOT_FOUND = "separator not found or invalid"
