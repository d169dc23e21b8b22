"""Chart-ready series built from normalized records."""

from __future__ import annotations

from typing import Sequence

import polars as pl

from src.application.reporting.metrics import fmt_axis_tick, to_float
from src.domain.campaigns import canonical_campaign_key, display_campaign
from src.domain.days import sequence_days
from src.domain.models import DAY, METRICS, ChartDataset, ChartSeries, NormalizedRecord

ALL = "ALL"
SERIES_COLORS: list[str] = ["#2563eb", "#16a34a", "#f97316", "#dc2626"]


def _candidates(records: Sequence[NormalizedRecord], campaigns: Sequence[str] | None) -> list[NormalizedRecord]:
    if campaigns is None:
        return list(records)
    selected = {canonical_campaign_key(name) for name in campaigns}
    return [record for record in records if canonical_campaign_key(record.campaign) in selected]


def metric_mean(
    records: Sequence[NormalizedRecord],
    day: str,
    metric: str,
    campaigns: Sequence[str] | None = None,
) -> float:
    """Mean of `metric` over the day's records of the selected campaigns (None selects all); 0.0 if none match."""
    return daily_means(records, [day], [metric], campaigns=campaigns)[metric][0]


def _metric_frame(records: Sequence[NormalizedRecord]) -> pl.DataFrame:
    schema = {DAY: pl.Utf8, **{metric: pl.Float64 for metric in METRICS}}
    return pl.DataFrame(
        {
            DAY: [record.day for record in records],
            **{metric: [to_float(record.value(metric)) for record in records] for metric in METRICS},
        },
        schema=schema,
    )


def daily_means(
    records: Sequence[NormalizedRecord],
    days: Sequence[str],
    metrics: Sequence[str],
    campaigns: Sequence[str] | None = None,
) -> dict[str, list[float]]:
    """Per-metric daily means aligned to `days`, with 0.0 for days without data."""
    frame = _metric_frame(_candidates(records, campaigns))
    means = frame.group_by(DAY).agg([pl.col(metric).mean() for metric in metrics])
    by_day = {row[DAY]: row for row in means.to_dicts()}

    output: dict[str, list[float]] = {}
    for metric in metrics:
        output[metric] = [float(by_day.get(day, {}).get(metric) or 0.0) for day in days]
    return output


def chart_title(campaign: str, metric: str) -> str:
    if campaign == ALL:
        return "All Campaigns – Combined Trend"
    metric_label = "All Metrics" if metric == ALL else metric
    return f"{display_campaign(campaign)} – {metric_label} Trend"


def build_chart_series(
    records: Sequence[NormalizedRecord],
    campaign: str = ALL,
    metric: str = ALL,
    currency_symbol: str = "₹",
) -> ChartSeries:
    """Day labels plus one averaged dataset per plotted metric for the campaign selection."""
    if metric != ALL and metric not in METRICS:
        raise ValueError(f"Unknown metric: {metric}")

    days = list(sequence_days(records).days)
    metrics = list(METRICS) if metric == ALL else [metric]
    campaigns = None if campaign == ALL else [campaign]
    means = daily_means(records, days, metrics, campaigns=campaigns)

    datasets: list[ChartDataset] = []
    ticks: dict[str, tuple[str, ...]] = {}
    for idx, name in enumerate(metrics):
        axis_id = f"y{idx}"
        datasets.append(
            ChartDataset(
                label=name,
                values=tuple(means[name]),
                axis_id=axis_id,
                position="left" if idx % 2 == 0 else "right",
                color=SERIES_COLORS[idx % len(SERIES_COLORS)],
            )
        )
        ticks[axis_id] = tuple(fmt_axis_tick(name, value, currency_symbol) for value in means[name])

    return ChartSeries(
        title=chart_title(campaign, metric),
        labels=tuple(days),
        datasets=tuple(datasets),
        axis_ticks=ticks,
    )
