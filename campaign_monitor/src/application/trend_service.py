"""Application service for day-over-day trend tables."""

from __future__ import annotations

from typing import Mapping

from src.application.reporting.metrics import clean_installs, strip_zero_cents, to_float
from src.domain.campaigns import display_campaign
from src.domain.models import (
    AVG_CPC,
    BAD,
    COST_PER_INSTALL,
    CTR,
    GOOD,
    INSTALLS,
    METRICS,
    CampaignSeries,
    CampaignTable,
    DaySequence,
    MetricRow,
    NormalizedRecord,
    TrendCell,
)


def is_good_trend(metric: str, latest: float, previous: float) -> bool:
    """Direction rules: CTR must rise, Installs must not fall, CPC and cost must not rise."""
    if metric == CTR:
        return latest > previous
    if metric == INSTALLS:
        return latest >= previous
    if metric in (AVG_CPC, COST_PER_INSTALL):
        return latest <= previous
    raise ValueError(f"Unknown metric: {metric}")


def classify_trend(metric: str, latest: NormalizedRecord | None, previous: NormalizedRecord | None) -> str | None:
    if latest is None or previous is None:
        return None
    good = is_good_trend(metric, to_float(latest.value(metric)), to_float(previous.value(metric)))
    return GOOD if good else BAD


def display_value(metric: str, record: NormalizedRecord | None) -> str:
    if record is None:
        return ""
    if metric == INSTALLS:
        return clean_installs(record.value(metric))
    return strip_zero_cents(record.value(metric))


def build_campaign_table(series: CampaignSeries, days: DaySequence) -> CampaignTable:
    last_day = days.last_day
    prev_day = days.prev_day
    latest = series.get(last_day)
    previous = series.get(prev_day)

    rows: list[MetricRow] = []
    for metric in METRICS:
        cells: list[TrendCell] = []
        for day in days.days:
            trend = classify_trend(metric, latest, previous) if day == last_day else None
            cells.append(TrendCell(day=day, display=display_value(metric, series.get(day)), trend=trend))
        rows.append(MetricRow(metric=metric, cells=tuple(cells)))

    return CampaignTable(
        key=series.key,
        display_name=display_campaign(series.key),
        days=days.days,
        rows=tuple(rows),
    )


def build_trend_tables(campaigns: Mapping[str, CampaignSeries], days: DaySequence) -> list[CampaignTable]:
    return [build_campaign_table(series, days) for series in campaigns.values()]
