"""Campaign performance monitor package."""

from .application import PortalState, build_portal, load_upload, render_chart
from .ingestion import normalize_rows, read_campaign_file

__all__ = [
    "PortalState",
    "build_portal",
    "load_upload",
    "render_chart",
    "normalize_rows",
    "read_campaign_file",
]
