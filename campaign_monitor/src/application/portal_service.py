"""Application service owning the per-upload portal state.

Each upload produces a fresh immutable `PortalState`; nothing is carried over
from the previous upload except on a decode failure, where the previous state
is kept and only its status message changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from src.application.alert_service import build_alert_groups, empty_alert_groups, has_alerts
from src.application.chart_service import ALL, build_chart_series
from src.application.reporting.rendering import (
    DECODE_FAILED_MESSAGE,
    NO_ALERTS_MESSAGE,
    NO_DAYS_MESSAGE,
    WAITING_MESSAGE,
    min_days_message,
    rendered_message,
)
from src.application.trend_service import build_trend_tables
from src.config import DEFAULT_CURRENCY_SYMBOL
from src.domain.benchmark import default_benchmarks
from src.domain.campaigns import campaign_options, group_by_campaign
from src.domain.days import sequence_days
from src.domain.models import (
    AlertRecord,
    BenchmarkRecord,
    CampaignSeries,
    CampaignTable,
    ChartSeries,
    DaySequence,
    NormalizedRecord,
)
from src.ingestion import EMPTY_RESULT_MESSAGE, CampaignFileError, normalize_rows, read_campaign_file

logger = logging.getLogger(__name__)

NO_UPLOAD_MESSAGE = "Please upload a file first."


@dataclass(frozen=True)
class PortalState:
    records: tuple[NormalizedRecord, ...] = ()
    campaigns: dict[str, CampaignSeries] = field(default_factory=dict)
    days: DaySequence = DaySequence()
    tables: tuple[CampaignTable, ...] = ()
    alerts: dict[str, list[AlertRecord]] = field(default_factory=empty_alert_groups)
    options: tuple[tuple[str, str], ...] = ()
    status: str = WAITING_MESSAGE
    source_name: str = ""
    chart: ChartSeries | None = None

    @property
    def has_data(self) -> bool:
        return bool(self.records)

    def with_status(self, status: str) -> "PortalState":
        return replace(self, status=status)

    def summary(self) -> dict[str, Any]:
        return {
            "source": self.source_name,
            "status": self.status,
            "days": list(self.days.days),
            "last_day": self.days.last_day,
            "prev_day": self.days.prev_day,
            "campaigns": [
                {
                    "campaign": table.key,
                    "display_name": table.display_name,
                    "rows": {
                        row.metric: [
                            {"day": cell.day, "value": cell.display, "trend": cell.trend} for cell in row.cells
                        ]
                        for row in table.rows
                    },
                }
                for table in self.tables
            ],
            "alerts": {metric: [alert.to_dict() for alert in rows] for metric, rows in self.alerts.items()},
            "alerts_message": NO_ALERTS_MESSAGE if self.tables and not has_alerts(self.alerts) else None,
            "campaign_options": [{"value": key, "label": label} for key, label in self.options],
        }


def build_portal(
    rows: Iterable[Mapping[Any, Any]],
    benchmarks: Sequence[BenchmarkRecord] | None = None,
    min_days: int = 1,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    source_name: str = "",
) -> PortalState:
    """Run normalize → group → sequence → trend/alerts over one upload."""
    records = tuple(normalize_rows(rows))
    if not records:
        return PortalState(status=EMPTY_RESULT_MESSAGE, source_name=source_name)

    days = sequence_days(records)
    if not days.days:
        return PortalState(records=records, status=NO_DAYS_MESSAGE, source_name=source_name)
    if len(days) < min_days:
        return PortalState(
            records=records,
            days=days,
            status=min_days_message(min_days, len(days)),
            source_name=source_name,
        )

    campaigns = group_by_campaign(records)
    tables = build_trend_tables(campaigns, days)
    alerts = build_alert_groups(
        campaigns,
        days.last_day,
        default_benchmarks() if benchmarks is None else benchmarks,
        currency_symbol=currency_symbol,
    )
    status = rendered_message(len(campaigns), days.days, days.prev_day, days.last_day)
    logger.info(status)

    return PortalState(
        records=records,
        campaigns=campaigns,
        days=days,
        tables=tuple(tables),
        alerts=alerts,
        options=tuple(campaign_options(campaigns.keys())),
        status=status,
        source_name=source_name,
    )


def load_upload(
    state: PortalState,
    path: str | Path,
    benchmarks: Sequence[BenchmarkRecord] | None = None,
    min_days: int = 1,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> PortalState:
    """Decode `path` and return a replacement state; on decode failure keep `state` and report it."""
    source = Path(path)
    try:
        rows = read_campaign_file(source)
    except (CampaignFileError, FileNotFoundError) as exc:
        logger.warning("Upload rejected: %s", exc)
        return state.with_status(DECODE_FAILED_MESSAGE)

    return build_portal(
        rows,
        benchmarks=benchmarks,
        min_days=min_days,
        currency_symbol=currency_symbol,
        source_name=source.name,
    )


def render_chart(
    state: PortalState,
    campaign: str = ALL,
    metric: str = ALL,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> PortalState:
    """Replace the state's chart with one for the given selection, reusing the normalized records."""
    if not state.has_data:
        return replace(state, chart=None, status=NO_UPLOAD_MESSAGE)
    chart = build_chart_series(
        state.records,
        campaign=campaign or ALL,
        metric=metric or ALL,
        currency_symbol=currency_symbol,
    )
    return replace(state, chart=chart)
