"""Domain models for campaign performance reconciliation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

CAMPAIGN = "Campaign"
DAY = "Day"
CTR = "CTR"
AVG_CPC = "Avg. CPC"
COST_PER_INSTALL = "Cost / Install"
INSTALLS = "Installs"

METRICS: list[str] = [CTR, AVG_CPC, COST_PER_INSTALL, INSTALLS]
ALERT_METRICS: list[str] = [CTR, AVG_CPC, COST_PER_INSTALL]
MONEY_METRICS: tuple[str, ...] = (AVG_CPC, COST_PER_INSTALL)

GOOD = "good"
BAD = "bad"

_METRIC_FIELDS: dict[str, str] = {
    CTR: "ctr",
    AVG_CPC: "avg_cpc",
    COST_PER_INSTALL: "cost_per_install",
    INSTALLS: "installs",
}


def _metric_field(metric: str) -> str:
    try:
        return _METRIC_FIELDS[metric]
    except KeyError as exc:
        raise ValueError(f"Unknown metric: {metric}") from exc


@dataclass(frozen=True)
class NormalizedRecord:
    """One campaign/day row after trimming and Installs cleanup."""

    campaign: str
    day: str
    ctr: str = ""
    avg_cpc: str = ""
    cost_per_install: str = ""
    installs: str = ""

    def value(self, metric: str) -> str:
        return getattr(self, _metric_field(metric))

    def to_row(self) -> dict[str, str]:
        row = {CAMPAIGN: self.campaign, DAY: self.day}
        for metric in METRICS:
            row[metric] = self.value(metric)
        return row


@dataclass(frozen=True)
class BenchmarkRecord:
    """Fixed target snapshot for one campaign; values stay raw until parsed."""

    campaign: str
    ctr: Any = None
    avg_cpc: Any = None
    cost_per_install: Any = None
    installs: Any = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "BenchmarkRecord":
        trimmed = {str(key or "").strip(): value for key, value in row.items()}
        return cls(
            campaign=str(trimmed.get(CAMPAIGN, "") or "").strip(),
            ctr=trimmed.get(CTR),
            avg_cpc=trimmed.get(AVG_CPC),
            cost_per_install=trimmed.get(COST_PER_INSTALL),
            installs=trimmed.get(INSTALLS),
        )

    def value(self, metric: str) -> Any:
        return getattr(self, _metric_field(metric))


@dataclass(frozen=True)
class AlertRecord:
    campaign: str
    date: str
    benchmark: str
    actual: str
    metric: str

    def to_dict(self) -> dict[str, str]:
        return {
            "Campaign": self.campaign,
            "Date": self.date,
            "Benchmark": self.benchmark,
            "Actual": self.actual,
            "metric": self.metric,
        }


@dataclass(frozen=True)
class CampaignSeries:
    """Day-indexed records of one campaign; at most one record per day."""

    key: str
    records: dict[str, NormalizedRecord] = field(default_factory=dict)

    def get(self, day: str | None) -> NormalizedRecord | None:
        if day is None:
            return None
        return self.records.get(day)


@dataclass(frozen=True)
class DaySequence:
    days: tuple[str, ...] = ()

    @property
    def last_day(self) -> str | None:
        return self.days[-1] if self.days else None

    @property
    def prev_day(self) -> str | None:
        return self.days[-2] if len(self.days) >= 2 else None

    def __len__(self) -> int:
        return len(self.days)


@dataclass(frozen=True)
class TrendCell:
    day: str
    display: str
    trend: str | None = None


@dataclass(frozen=True)
class MetricRow:
    metric: str
    cells: tuple[TrendCell, ...]


@dataclass(frozen=True)
class CampaignTable:
    key: str
    display_name: str
    days: tuple[str, ...]
    rows: tuple[MetricRow, ...]

    def cell(self, metric: str, day: str) -> TrendCell | None:
        for row in self.rows:
            if row.metric != metric:
                continue
            for cell in row.cells:
                if cell.day == day:
                    return cell
        return None


@dataclass(frozen=True)
class ChartDataset:
    label: str
    values: tuple[float, ...]
    axis_id: str
    position: str
    color: str


@dataclass(frozen=True)
class ChartSeries:
    title: str
    labels: tuple[str, ...]
    datasets: tuple[ChartDataset, ...]
    axis_ticks: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "labels": list(self.labels),
            "datasets": [
                {
                    "label": dataset.label,
                    "data": list(dataset.values),
                    "yAxisID": dataset.axis_id,
                    "position": dataset.position,
                    "borderColor": dataset.color,
                }
                for dataset in self.datasets
            ],
            "axis_ticks": {axis: list(ticks) for axis, ticks in self.axis_ticks.items()},
        }
