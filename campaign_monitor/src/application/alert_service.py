"""Application service for benchmark regression alerts."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from src.application.reporting.metrics import fmt_metric_value, to_float
from src.domain.benchmark import build_benchmark_lookup
from src.domain.campaigns import display_campaign
from src.domain.models import ALERT_METRICS, CTR, AlertRecord, BenchmarkRecord, CampaignSeries

logger = logging.getLogger(__name__)


def is_regression(metric: str, actual: float, benchmark: float) -> bool:
    if metric == CTR:
        return actual < benchmark
    return actual > benchmark


def empty_alert_groups() -> dict[str, list[AlertRecord]]:
    return {metric: [] for metric in ALERT_METRICS}


def build_alert_groups(
    campaigns: Mapping[str, CampaignSeries],
    last_day: str | None,
    benchmarks: Iterable[BenchmarkRecord],
    currency_symbol: str = "₹",
) -> dict[str, list[AlertRecord]]:
    """Compare each campaign's latest day with its benchmark and keep only the regressions.

    Installs never alert. A benchmark that parses to exactly 0 (including an
    unparseable one) means "no usable benchmark" and the metric is skipped.
    Campaigns missing from the benchmark set, or without a record on the
    latest day, are left out without error.
    """
    groups = empty_alert_groups()
    lookup = build_benchmark_lookup(benchmarks)

    for key, series in campaigns.items():
        latest = series.get(last_day)
        bench = lookup.get(key)
        if latest is None or bench is None:
            continue

        display_name = display_campaign(key)
        for metric in ALERT_METRICS:
            actual_value = to_float(latest.value(metric))
            bench_value = to_float(bench.value(metric))
            if bench_value == 0:
                continue
            if not is_regression(metric, actual_value, bench_value):
                continue
            groups[metric].append(
                AlertRecord(
                    campaign=display_name,
                    date=str(last_day),
                    benchmark=fmt_metric_value(metric, bench_value, currency_symbol),
                    actual=fmt_metric_value(metric, actual_value, currency_symbol),
                    metric=metric,
                )
            )

    logger.info(
        "Benchmark alerts: %s",
        ", ".join(f"{metric}={len(rows)}" for metric, rows in groups.items()),
    )
    return groups


def has_alerts(groups: Mapping[str, list[AlertRecord]]) -> bool:
    return any(groups.get(metric) for metric in ALERT_METRICS)
