"""Benchmark snapshot and lookup."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from src.domain.campaigns import canonical_campaign_key
from src.domain.models import BenchmarkRecord

# Zero rows mean "no usable benchmark" and never raise alerts.
BENCHMARK_SNAPSHOT: list[dict[str, Any]] = [
    {"Campaign": "D IQ 2: Andrd India Ads 10", "CTR": "3.58%", "Avg. CPC": 0.3, "Cost / Install": 0.56, "Installs": 557437},
    {"Campaign": "D IQ 2: Andrd Bangla Ads 20", "CTR": "5.09%", "Avg. CPC": 0.24, "Cost / Install": 0.41, "Installs": 221995},
    {"Campaign": "Brain Games: Andrd India TLC 25 v1", "CTR": "3.57%", "Avg. CPC": 0.27, "Cost / Install": 0.61, "Installs": 5390},
    {"Campaign": "D IQ 2: Andrd Spanish Ads 10 v1", "CTR": "2.45%", "Avg. CPC": 1.21, "Cost / Install": 2.3, "Installs": 1214},
    {"Campaign": "D IQ 2: Andrd Portuguese Ads 10 v1", "CTR": "2.27%", "Avg. CPC": 1.16, "Cost / Install": 2.26, "Installs": 45912},
    {"Campaign": "D IQ 3: Andrd India Ads 20", "CTR": 0, "Avg. CPC": 0, "Cost / Install": 0, "Installs": 0},
    {"Campaign": "D IQ 2: Andrd Pak Ads 20", "CTR": "3.73%", "Avg. CPC": 0.25, "Cost / Install": 0.55, "Installs": 115459},
    {"Campaign": "D IQ 2: Andrd India ROAS", "CTR": "3.26%", "Avg. CPC": 0.41, "Cost / Install": 0.72, "Installs": 512854},
    {"Campaign": "D IQ 2: Andrd India Ads 20 v1", "CTR": "3.04%", "Avg. CPC": 0.32, "Cost / Install": 0.73, "Installs": 331176},
    {"Campaign": "D IQ 2: Andrd Indonesia Ads 20 V1", "CTR": "2.44%", "Avg. CPC": 0.69, "Cost / Install": 1.48, "Installs": 37576},
    {"Campaign": "D IQ 2: Andrd Turkish TLC 15", "CTR": "2.40%", "Avg. CPC": 0.72, "Cost / Install": 1.35, "Installs": 66402},
    {"Campaign": "D IQ 2: Andrd Turkish ROAS", "CTR": "2.26%", "Avg. CPC": 1.11, "Cost / Install": 2.3, "Installs": 36313},
    {"Campaign": "D IQ 3: Andrd India Ads 10", "CTR": "4.93%", "Avg. CPC": 0.19, "Cost / Install": 0.51, "Installs": 69692},
    {"Campaign": "D IQ 2: Andrd Portuguese ROAS 135", "CTR": "2.35%", "Avg. CPC": 1.64, "Cost / Install": 3.08, "Installs": 5991},
    {"Campaign": "D IQ 2: Andrd French Ads 10", "CTR": 0, "Avg. CPC": 0, "Cost / Install": 0, "Installs": 0},
    {"Campaign": "D IQ 2: Andrd Pak ROAS 150", "CTR": 0, "Avg. CPC": 0, "Cost / Install": 0, "Installs": 0},
]


def default_benchmarks() -> list[BenchmarkRecord]:
    return [BenchmarkRecord.from_row(row) for row in BENCHMARK_SNAPSHOT]


def benchmarks_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[BenchmarkRecord]:
    records = [BenchmarkRecord.from_row(row) for row in rows]
    return [record for record in records if record.campaign]


def build_benchmark_lookup(benchmarks: Iterable[BenchmarkRecord]) -> dict[str, BenchmarkRecord]:
    """Key benchmarks by campaign key; a later entry for the same campaign replaces an earlier one."""
    lookup: dict[str, BenchmarkRecord] = {}
    for record in benchmarks:
        lookup[canonical_campaign_key(record.campaign)] = record
    return lookup
