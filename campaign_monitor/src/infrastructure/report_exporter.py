"""Infrastructure adapter for summary export targets."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from src.application.portal_service import PortalState
from src.reporting import write_html_report


def save_summary_json(path: Path, summary: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, indent=2, ensure_ascii=False), encoding="utf-8")


def save_chart_json(path: Path, state: PortalState) -> bool:
    if state.chart is None:
        return False
    save_summary_json(path, state.chart.to_dict())
    return True


def save_summary_html(path: Path, state: PortalState) -> None:
    write_html_report(path, state)
