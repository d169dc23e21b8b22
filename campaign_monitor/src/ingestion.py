"""CSV/Excel ingestion and row normalization with Polars-first and openpyxl fallback."""

from __future__ import annotations

import io
import json
import logging
import math
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Sequence

import polars as pl
from xlsxwriter import Workbook as XlsxWorkbook

from src.application.reporting.metrics import clean_installs
from src.domain.models import AVG_CPC, CAMPAIGN, COST_PER_INSTALL, CTR, DAY, INSTALLS, NormalizedRecord

logger = logging.getLogger(__name__)

CSV_EXTENSIONS: tuple[str, ...] = (".csv", ".txt")
HEADER_LINE = re.compile(r"^\s*Campaign\s*,", re.IGNORECASE)
EMPTY_RESULT_MESSAGE = "No valid rows found. Make sure header starts at Campaign,…"


class CampaignFileError(ValueError):
    """Raised when an uploaded export cannot be decoded into rows."""


def _import_openpyxl() -> tuple[Any, Any]:
    try:
        from openpyxl import Workbook, load_workbook
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("openpyxl is required for Excel fallback I/O.") from exc
    return Workbook, load_workbook


def _normalize_headers(raw_headers: Sequence[Any]) -> list[str]:
    headers: list[str] = []
    seen: dict[str, int] = {}
    for idx, value in enumerate(raw_headers):
        base = str(value).strip() if value not in (None, "") else f"column_{idx + 1}"
        count = seen.get(base, 0)
        name = base if count == 0 else f"{base}_{count + 1}"
        seen[base] = count + 1
        headers.append(name)
    return headers


def filter_header_lines(text: str) -> str:
    """Drop title lines above the `Campaign,...` header and any blank lines."""
    lines = text.splitlines()
    start = next((idx for idx, line in enumerate(lines) if HEADER_LINE.match(line)), 0)
    return "\n".join(line for line in lines[start:] if line.strip())


def _read_csv_rows(path: Path) -> list[dict[str, Any]]:
    text = filter_header_lines(path.read_text(encoding="utf-8-sig"))
    if not text:
        return []
    frame = pl.read_csv(
        io.BytesIO(text.encode("utf-8")),
        infer_schema_length=0,
        truncate_ragged_lines=True,
    )
    return frame.to_dicts()


def _frame_from_polars_result(frame: Any) -> pl.DataFrame:
    if isinstance(frame, dict):
        first_key = next(iter(frame.keys()), None)
        if first_key is None:
            return pl.DataFrame()
        return frame[first_key]
    return frame


def _read_excel_with_polars(path: Path) -> list[dict[str, Any]]:
    if not hasattr(pl, "read_excel"):
        raise RuntimeError("polars.read_excel is not available in this environment.")
    # calamine engine (fastexcel); date cells arrive as date/datetime values
    frame = _frame_from_polars_result(pl.read_excel(path, sheet_id=1, engine="calamine"))
    if CAMPAIGN not in {str(column).strip() for column in frame.columns}:
        raise ValueError(f"No {CAMPAIGN} header on the first row of {path.name}")
    return frame.to_dicts()


def _is_header_row(values: Sequence[Any]) -> bool:
    first = next((value for value in values if value not in (None, "")), None)
    return first is not None and str(first).strip().lower() == CAMPAIGN.lower()


def _read_excel_with_openpyxl(path: Path) -> list[dict[str, Any]]:
    _, load_workbook = _import_openpyxl()
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        if not workbook.sheetnames:
            return []
        worksheet = workbook[workbook.sheetnames[0]]
        rows = [values for values in worksheet.iter_rows(values_only=True) if values is not None]
    finally:
        workbook.close()

    rows = [values for values in rows if any(value not in (None, "") for value in values)]
    if not rows:
        return []
    start = next((idx for idx, values in enumerate(rows) if _is_header_row(values)), 0)
    headers = _normalize_headers(rows[start])
    records: list[dict[str, Any]] = []
    for values in rows[start + 1 :]:
        records.append({name: (values[idx] if idx < len(values) else "") for idx, name in enumerate(headers)})
    return records


def read_campaign_file(path: str | Path) -> list[dict[str, Any]]:
    """Decode a CSV or spreadsheet export into raw row mappings (first sheet only)."""
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Input file not found: {source}")

    try:
        if source.suffix.lower() in CSV_EXTENSIONS:
            rows = _read_csv_rows(source)
        else:
            try:
                rows = _read_excel_with_polars(source)
            except Exception as exc:
                logger.debug("polars could not read %s (%s), retrying with openpyxl", source.name, exc)
                rows = _read_excel_with_openpyxl(source)
    except Exception as exc:
        # openpyxl raises zipfile/KeyError variants for non-workbook payloads.
        raise CampaignFileError(f"Failed to decode {source.name}: {exc}") from exc

    logger.info("Decoded %d raw row(s) from %s", len(rows), source.name)
    return rows


def _raw_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def normalize_columns(row: Mapping[Any, Any]) -> dict[str, Any]:
    return {str(key or "").strip(): value for key, value in row.items()}


def normalize_rows(rows: Iterable[Mapping[Any, Any]]) -> list[NormalizedRecord]:
    """Map raw rows onto the fixed schema, dropping rows without Campaign or Day."""
    records: list[NormalizedRecord] = []
    for raw in rows:
        row = normalize_columns(raw)
        campaign = _raw_text(row.get(CAMPAIGN))
        day = _raw_text(row.get(DAY))
        if not campaign or not day:
            continue
        records.append(
            NormalizedRecord(
                campaign=campaign,
                day=day,
                ctr=_raw_text(row.get(CTR)),
                avg_cpc=_raw_text(row.get(AVG_CPC)),
                cost_per_install=_raw_text(row.get(COST_PER_INSTALL)),
                installs=clean_installs(row.get(INSTALLS)),
            )
        )
    logger.debug("Normalized %d record(s)", len(records))
    return records


def _excel_cell_value(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (int, bool, str)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return value
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return value


def _write_with_polars(path: Path, sheets: Dict[str, pl.DataFrame]) -> bool:
    if not sheets:
        return False
    first_df = next(iter(sheets.values()))
    if not hasattr(first_df, "write_excel"):
        return False

    try:
        with XlsxWorkbook(str(path)) as workbook:
            for sheet_name, frame in sheets.items():
                frame.write_excel(workbook, worksheet=str(sheet_name)[:31])
        return True
    except Exception:
        logger.debug("polars Excel writer failed for %s, falling back to openpyxl", path)
        return False


def _write_with_openpyxl(path: Path, sheets: Dict[str, pl.DataFrame]) -> None:
    Workbook, _ = _import_openpyxl()
    workbook = Workbook()
    workbook.remove(workbook.active)

    for sheet_name, frame in sheets.items():
        worksheet = workbook.create_sheet(title=str(sheet_name)[:31])
        worksheet.append(frame.columns)
        for row in frame.iter_rows(named=False):
            worksheet.append([_excel_cell_value(value) for value in row])

    workbook.save(path)


def write_output_excel(path: str | Path, sheets: Dict[str, pl.DataFrame]) -> None:
    """Write output Excel with Polars-first and openpyxl fallback."""
    excel_path = Path(path)
    excel_path.parent.mkdir(parents=True, exist_ok=True)

    if _write_with_polars(excel_path, sheets):
        return
    _write_with_openpyxl(excel_path, sheets)
