"""Infrastructure layer package."""

from .excel_repository import load_benchmark_file, save_output_workbook
from .report_exporter import save_chart_json, save_summary_html, save_summary_json

__all__ = ["load_benchmark_file", "save_output_workbook", "save_chart_json", "save_summary_json", "save_summary_html"]
