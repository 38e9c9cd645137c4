"""
Separator inference.

A candidate qualifies when every sampled line contains it at least once and
exactly as many times as the first line does. This is a count heuristic, not
a parser: quoted separators are counted like any other.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .models import SeparatorResult, StatusReport
from .rules import DEFAULT_SAMPLE_SIZE, MSG_SEPARATOR_NOT_FOUND, MSG_TOO_FEW_LINES

logger = logging.getLogger(__name__)


def _is_consistent(sample: Sequence[str], candidate: str) -> bool:
    if not candidate:
        return False

    expected = sample[0].count(candidate)
    if expected == 0:
        return False

    return all(line.count(candidate) == expected for line in sample)


def resolve_separator(
    lines: Sequence[str],
    candidates: Iterable[str],
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> SeparatorResult:
    """
    Pick the first candidate used consistently across the leading lines.

    The first ``min(sample_size, len(lines))`` lines are sampled, line 0
    included. Failures are reported in the returned status, never raised.
    """
    if len(lines) < 2:
        logger.warning("Separator detection skipped: %s", MSG_TOO_FEW_LINES)
        return SeparatorResult(status=StatusReport(failed=True, message=MSG_TOO_FEW_LINES))

    sample = lines[: max(sample_size, 1)]

    for candidate in candidates:
        if _is_consistent(sample, candidate):
            logger.debug("Separator %r accepted over %d sampled lines", candidate, len(sample))
            return SeparatorResult(separator=candidate)
        logger.debug("Separator %r rejected", candidate)

    logger.warning("Separator detection failed: %s", MSG_SEPARATOR_NOT_FOUND)
    return SeparatorResult(status=StatusReport(failed=True, message=MSG_SEPARATOR_NOT_FOUND))
