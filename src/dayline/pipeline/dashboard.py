"""
Drive one fetch → normalize → render cycle per feed and publish the pages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from ..api import FEED_KINDS, FeedFetchError, FeedRecord, fetch_feed
from ..render import ContentArea, DashboardPage, RenderTarget, render_dashboard_page, render_feed, render_index_page
from ..util import LocalTimeSupport, ensure_directory, site_lock
from .normalize import _UNSET, _Unset, format_data, resolve_local_time

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], FeedRecord]


@dataclass
class DashboardReport:
    """
    Outcome of a dashboard build.

    Attributes:
        root: Directory the pages were written to.
        built: Feed pages written during this build.
        failed: Feed kind -> error message for feeds that could not be fetched.
        index_path: Landing page, if one was written.
    """
    root: Path
    built: List[Path] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
    index_path: Optional[Path] = None

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Pages written", str(len(self.built)))
        yield ("Feeds failed", ", ".join(sorted(self.failed)) or "none")
        yield ("Index updated", "yes" if self.index_path else "no")


def refresh_feed(
    kind: str,
    target: RenderTarget,
    *,
    local_time: Optional[LocalTimeSupport],
    fetch: Fetcher = fetch_feed,
    **collaborators: Any,
) -> FeedRecord:
    """
    Fetch a feed, normalize it and render it into `target`.

    Fetch errors propagate and leave `target` untouched.
    """
    record = fetch(kind)
    format_data(record, local_time=local_time)
    render_feed(kind, record, target, **collaborators)
    return record


def build_dashboard(
    web_root: Path | str,
    kinds: Iterable[str] = FEED_KINDS,
    *,
    fetch: Fetcher = fetch_feed,
    local_time: Union[Optional[LocalTimeSupport], _Unset] = _UNSET,
) -> DashboardReport:
    """
    Build `<kind>.html` for each requested feed plus an `index.html`.

    A feed that cannot be fetched is skipped and any page from an earlier build is
    left in place. Feeds are fetched and rendered first; pages and the index are then
    written while holding the web root's publish lock.
    """
    root = ensure_directory(web_root)
    report = DashboardReport(root=root)
    if isinstance(local_time, _Unset):
        local_time = resolve_local_time()

    rendered: List[tuple[str, ContentArea]] = []
    for kind in kinds:
        area = ContentArea()
        try:
            refresh_feed(kind, area, local_time=local_time, fetch=fetch)
        except FeedFetchError as exc:
            logger.warning("Skipping %s page: %s", kind, exc)
            report.failed[kind] = str(exc)
            continue
        rendered.append((kind, area))

    with site_lock(root):
        for kind, area in rendered:
            page = DashboardPage(destination=root / f"{kind}.html", kind=kind, content_html=area.markup)
            report.built.append(render_dashboard_page(page))
            logger.info("Wrote %s page to %s", kind, page.destination)

        available = [kind for kind in FEED_KINDS if (root / f"{kind}.html").exists()]
        if available:
            report.index_path = render_index_page(root / "index.html", available)
    return report
