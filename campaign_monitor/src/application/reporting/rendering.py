"""Status and summary text helpers."""

from __future__ import annotations

from typing import Mapping, Sequence

from src.domain.models import AlertRecord

NO_DAYS_MESSAGE = "No days found in data."
DECODE_FAILED_MESSAGE = "Failed to parse file. Check format and try again."
WAITING_MESSAGE = "Waiting for file…"
NO_ALERTS_MESSAGE = "No negative trend detected vs benchmark."


def min_days_message(min_days: int, found: int) -> str:
    return f"Need at least {min_days} days to compare; found {found}."


def rendered_message(campaign_count: int, days: Sequence[str], prev_day: str | None, last_day: str | None) -> str:
    return (
        f"Rendered {campaign_count} campaign(s), {len(days)} day(s). "
        f"Comparing {prev_day or 'N/A'} → {last_day or 'N/A'}."
    )


def alert_summary_lines(groups: Mapping[str, Sequence[AlertRecord]]) -> list[str]:
    lines: list[str] = []
    for metric, rows in groups.items():
        for row in rows:
            lines.append(f"[{metric}] {row.campaign} {row.date}: benchmark {row.benchmark}, actual {row.actual}")
    if not lines:
        return [NO_ALERTS_MESSAGE]
    return lines
