"""Application layer package."""

from .alert_service import build_alert_groups
from .chart_service import build_chart_series, metric_mean
from .portal_service import PortalState, build_portal, load_upload, render_chart
from .trend_service import build_trend_tables, classify_trend

__all__ = [
    "PortalState",
    "build_alert_groups",
    "build_chart_series",
    "build_portal",
    "build_trend_tables",
    "classify_trend",
    "load_upload",
    "metric_mean",
    "render_chart",
]
