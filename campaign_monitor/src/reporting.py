"""HTML dashboard generator for campaign trend tables and benchmark alerts."""

from __future__ import annotations

from datetime import datetime
from html import escape
from pathlib import Path
from typing import List, Sequence

from src.application.alert_service import has_alerts
from src.application.portal_service import PortalState
from src.application.reporting.rendering import NO_ALERTS_MESSAGE
from src.domain.models import ALERT_METRICS, AlertRecord, CampaignTable, TrendCell


def _render_cell(cell: TrendCell) -> str:
    if cell.trend is None:
        return f"<td>{escape(cell.display)}</td>"
    return f"<td><span class=\"{escape(cell.trend)}\">{escape(cell.display)}</span></td>"


def _render_campaign_table(table: CampaignTable) -> str:
    head = "".join(f"<th>{escape(day)}</th>" for day in table.days)
    body: List[str] = []
    for row in table.rows:
        cells = "".join(_render_cell(cell) for cell in row.cells)
        body.append(f"<tr class=\"metric-row\"><td class=\"metric-name\">{escape(row.metric)}</td>{cells}</tr>")
    return (
        "<table class=\"camp-table\">"
        f"<thead><tr><th>{escape(table.display_name)}</th>{head}</tr></thead>"
        f"<tbody>{''.join(body)}</tbody>"
        "</table>"
    )


def _render_alert_table(metric: str, rows: Sequence[AlertRecord]) -> str:
    if not rows:
        return ""
    body = "".join(
        "<tr>"
        f"<td>{escape(row.campaign)}</td>"
        f"<td>{escape(row.date)}</td>"
        f"<td class=\"benchmark\">{escape(row.benchmark)}</td>"
        f"<td class=\"actual bad\">{escape(row.actual)}</td>"
        "</tr>"
        for row in rows
    )
    return (
        "<table class=\"alert-table\">"
        f"<thead><tr><th colspan=\"4\" class=\"alert-title\">{escape(metric)} Alerts</th></tr>"
        "<tr><th>Campaign</th><th>Date</th><th>Benchmark</th><th>Actual</th></tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table>"
    )


def write_html_report(output_path: Path, state: PortalState) -> None:
    tables_html = "".join(_render_campaign_table(table) for table in state.tables)
    if not tables_html:
        tables_html = "<p class=\"muted\">No campaign tables to show.</p>"

    if has_alerts(state.alerts):
        alerts_html = "".join(_render_alert_table(metric, state.alerts.get(metric, [])) for metric in ALERT_METRICS)
    elif state.tables:
        alerts_html = f"<p class=\"all-clear\">{escape(NO_ALERTS_MESSAGE)}</p>"
    else:
        alerts_html = ""

    generated_at = datetime.now().strftime("%Y-%m-%d %H:%M")

    html = f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Campaign Performance Monitor</title>
  <style>
    :root {{
      --bg: #f3f6fb;
      --panel: #ffffff;
      --line: #d5dce8;
      --text: #0f172a;
      --sub: #475569;
      --brand: #0f766e;
      --good: #16a34a;
      --bad: #dc2626;
    }}
    * {{ box-sizing: border-box; }}
    body {{
      margin: 0;
      background: linear-gradient(180deg, #e9efff 0%, var(--bg) 35%);
      color: var(--text);
      font-family: "Segoe UI", sans-serif;
    }}
    .wrap {{
      max-width: 1700px;
      margin: 0 auto;
      padding: 20px;
    }}
    .panel {{
      background: var(--panel);
      border: 1px solid var(--line);
      border-radius: 14px;
      box-shadow: 0 4px 16px rgba(15, 23, 42, 0.05);
      padding: 14px 18px;
      margin-bottom: 14px;
    }}
    h1 {{
      margin: 0 0 8px;
      color: var(--brand);
      font-size: 28px;
    }}
    .meta, .muted {{
      color: var(--sub);
      font-size: 13px;
    }}
    table {{
      width: 100%;
      border-collapse: collapse;
      font-size: 12px;
      margin-bottom: 14px;
    }}
    th, td {{
      border: 1px solid var(--line);
      padding: 6px 8px;
      text-align: left;
    }}
    th {{
      background: #eef4ff;
      font-weight: 700;
    }}
    .metric-name {{ font-weight: 600; }}
    .alert-title {{
      background: #f1f5ff;
      font-size: 15px;
      text-align: center;
    }}
    .benchmark {{ color: black; }}
    .good {{ color: var(--good); font-weight: 600; }}
    .bad {{ color: var(--bad); font-weight: 600; }}
    .all-clear {{ color: var(--good); font-weight: 600; }}
  </style>
</head>
<body>
  <div class="wrap">
    <section class="panel">
      <h1>Campaign Performance Monitor</h1>
      <div class="meta">Source: {escape(state.source_name or "N/A")} | Generated: {escape(generated_at)}</div>
      <p class="status">{escape(state.status)}</p>
    </section>
    <section class="panel">
      <h2>Benchmark Alerts</h2>
      {alerts_html}
    </section>
    <section class="panel">
      <h2>Campaigns</h2>
      {tables_html}
    </section>
  </div>
</body>
</html>
"""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
