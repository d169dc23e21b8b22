"""Campaign Monitor entrypoint."""

from __future__ import annotations

import logging

from src.application.chart_service import ALL
from src.application.portal_service import PortalState, load_upload, render_chart
from src.application.reporting.rendering import alert_summary_lines
from src.config import load_settings
from src.domain.benchmark import default_benchmarks
from src.infrastructure.excel_repository import load_benchmark_file, save_output_workbook
from src.infrastructure.report_exporter import save_chart_json, save_summary_html, save_summary_json
from src.ingestion import CampaignFileError


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    output_json_path = settings.output_dir / "summary.json"
    output_excel_path = settings.output_dir / "summary.xlsx"
    output_html_path = settings.output_dir / "dashboard.html"
    output_chart_path = settings.output_dir / "chart_series.json"

    if settings.benchmark_path is not None:
        try:
            benchmarks = load_benchmark_file(settings.benchmark_path)
        except (CampaignFileError, FileNotFoundError) as exc:
            print(f"Failed to load benchmarks: {exc}")
            return
    else:
        benchmarks = default_benchmarks()

    state = load_upload(
        PortalState(),
        settings.input_path,
        benchmarks=benchmarks,
        min_days=settings.min_days,
        currency_symbol=settings.currency_symbol,
    )
    print(state.status)
    if not state.tables:
        return

    state = render_chart(state, campaign=ALL, metric=ALL, currency_symbol=settings.currency_symbol)

    for line in alert_summary_lines(state.alerts):
        print(line)

    save_summary_json(output_json_path, state.summary())
    save_summary_html(output_html_path, state)
    excel_saved, excel_error_message = save_output_workbook(output_excel_path, state)
    chart_saved = save_chart_json(output_chart_path, state)

    print(f"Saved JSON: {output_json_path}")
    print(f"Saved HTML: {output_html_path}")
    if chart_saved:
        print(f"Saved chart series: {output_chart_path}")
    if excel_saved:
        print(f"Saved Excel: {output_excel_path}")
    else:
        print(f"Excel save skipped (file may be open/locked): {excel_error_message}")


if __name__ == "__main__":
    main()
