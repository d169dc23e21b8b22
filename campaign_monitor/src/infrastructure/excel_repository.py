"""Infrastructure adapter for spreadsheet inputs and workbook output."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import polars as pl

from src.application.portal_service import PortalState
from src.domain.benchmark import benchmarks_from_rows
from src.domain.models import ALERT_METRICS, BenchmarkRecord
from src.ingestion import CampaignFileError, read_campaign_file, write_output_excel

logger = logging.getLogger(__name__)

ALERT_COLUMNS: list[str] = ["Campaign", "Date", "Benchmark", "Actual"]
ALERT_SHEET_NAMES: dict[str, str] = {
    "CTR": "ctr_alerts",
    "Avg. CPC": "avg_cpc_alerts",
    "Cost / Install": "cost_per_install_alerts",
}


def load_benchmark_file(path: Path) -> list[BenchmarkRecord]:
    """Read benchmark rows from a JSON array or a CSV/XLSX export with a Campaign header."""
    if not path.exists():
        raise FileNotFoundError(f"Benchmark file not found: {path}")
    if path.suffix.lower() == ".json":
        try:
            payload: Any = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CampaignFileError(f"Failed to decode {path.name}: {exc}") from exc
        if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
            raise CampaignFileError(f"Benchmark JSON must be an array of objects: {path.name}")
        rows = payload
    else:
        rows = read_campaign_file(path)
    benchmarks = benchmarks_from_rows(rows)
    logger.info("Loaded %d benchmark record(s) from %s", len(benchmarks), path.name)
    return benchmarks


def _alert_sheet_df(state: PortalState, metric: str) -> pl.DataFrame:
    rows = [
        {"Campaign": alert.campaign, "Date": alert.date, "Benchmark": alert.benchmark, "Actual": alert.actual}
        for alert in state.alerts.get(metric, [])
    ]
    if not rows:
        return pl.DataFrame({column: [] for column in ALERT_COLUMNS}, schema={column: pl.Utf8 for column in ALERT_COLUMNS})
    return pl.DataFrame(rows).select(ALERT_COLUMNS)


def _campaign_matrix_df(state: PortalState) -> pl.DataFrame:
    days = list(state.days.days)
    columns = ["Campaign", "Metric", *days, "Trend"]
    rows: list[dict[str, Any]] = []
    for table in state.tables:
        for metric_row in table.rows:
            row: dict[str, Any] = {"Campaign": table.display_name, "Metric": metric_row.metric, "Trend": ""}
            for cell in metric_row.cells:
                row[cell.day] = cell.display
                if cell.trend:
                    row["Trend"] = cell.trend
            rows.append(row)
    if not rows:
        return pl.DataFrame({column: [] for column in columns}, schema={column: pl.Utf8 for column in columns})
    return pl.DataFrame(rows, schema={column: pl.Utf8 for column in columns})


def save_output_workbook(path: Path, state: PortalState) -> tuple[bool, str]:
    sheets = {"campaigns": _campaign_matrix_df(state)}
    for metric in ALERT_METRICS:
        sheets[ALERT_SHEET_NAMES[metric]] = _alert_sheet_df(state, metric)
    try:
        write_output_excel(path, sheets)
    except PermissionError as exc:
        return False, str(exc)
    return True, ""
