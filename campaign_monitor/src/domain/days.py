"""Day label sequencing."""

from __future__ import annotations

from typing import Iterable

from src.domain.models import DaySequence, NormalizedRecord


def sequence_days(records: Iterable[NormalizedRecord]) -> DaySequence:
    """Distinct day labels across all campaigns in plain string order.

    Labels are compared codepoint-wise, so they only sort chronologically
    when formatted like ISO dates (zero-padded, largest unit first).
    """
    return DaySequence(days=tuple(sorted({record.day for record in records})))
