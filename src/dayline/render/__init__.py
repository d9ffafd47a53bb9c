"""
Rendering utilities (feed templates, sanitizing, markdown -> HTML, pages).
"""

from .html import (
    FEED_TITLES,
    RENDERERS,
    ContentArea,
    DashboardPage,
    RenderTarget,
    markdown_to_html,
    render_air_quality,
    render_dashboard_page,
    render_edb,
    render_feed,
    render_index_page,
    render_news,
    render_weather,
    sanitize_html,
)

__all__ = [
    "FEED_TITLES",
    "RENDERERS",
    "ContentArea",
    "DashboardPage",
    "RenderTarget",
    "markdown_to_html",
    "render_air_quality",
    "render_dashboard_page",
    "render_edb",
    "render_feed",
    "render_index_page",
    "render_news",
    "render_weather",
    "sanitize_html",
]
