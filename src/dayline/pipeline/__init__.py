"""
Fetch → normalize → render pipeline for the dashboard.
"""

from .normalize import format_data, resolve_local_time
from .dashboard import DashboardReport, build_dashboard, refresh_feed

__all__ = ["format_data", "resolve_local_time", "DashboardReport", "build_dashboard", "refresh_feed"]
