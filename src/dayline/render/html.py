"""
Feed HTML rendering utilities.

Feed fields are untrusted. Each renderer interpolates them raw into its layout and
then runs the whole fragment through the sanitizer before it reaches the content
area, so the sanitizer is the single place where markup is made safe.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Protocol

import nh3

from ..api import FEED_KINDS, FeedRecord
from ..util import ensure_directory, write_text_file

Sanitizer = Callable[[str], str]
MarkdownConverter = Callable[[str], str]

FEED_TITLES: Dict[str, str] = {
    "weather": "Weather",
    "edb": "Environment",
    "aqi": "Air Quality",
    "news": "News",
}

# Tags used by the feed layouts; they keep their `class` attribute through sanitizing.
_LAYOUT_TAGS = {"article", "h2", "p", "div"}

_ALLOWED_TAGS = set(nh3.ALLOWED_TAGS) | _LAYOUT_TAGS
_ALLOWED_ATTRIBUTES = {tag: set(attrs) for tag, attrs in nh3.ALLOWED_ATTRIBUTES.items()}
for _tag in _LAYOUT_TAGS:
    _ALLOWED_ATTRIBUTES.setdefault(_tag, set()).add("class")


class RenderTarget(Protocol):
    def replace(self, fragment: str) -> None: ...


@dataclass
class ContentArea:
    """In-memory render target holding the markup of one feed."""

    markup: str = ""

    def replace(self, fragment: str) -> None:
        self.markup = fragment


def sanitize_html(fragment: str) -> str:
    """
    Strip scripts, event handlers, `javascript:` links, frames and unknown tags.
    """
    return nh3.clean(fragment, tags=_ALLOWED_TAGS, attributes=_ALLOWED_ATTRIBUTES)


def markdown_to_html(text: str) -> str:
    """
    Convert the small markdown subset used by news feeds into HTML.

    Handles `###` headings, bullet lists, bold, italic, links and line breaks.
    Raw HTML in the input is passed through untouched.
    """
    bullet_regex = re.compile(r"^([*\-•])\s+(.*)")

    def convert_lists(md: str) -> str:
        result = []
        in_list = False
        for line in md.splitlines():
            match = bullet_regex.match(line.strip())
            if match:
                if not in_list:
                    result.append("<ul>")
                    in_list = True
                result.append(f"<li>{match.group(2).strip()}</li>")
            else:
                if in_list:
                    result.append("</ul>")
                    in_list = False
                result.append(line)
        if in_list:
            result.append("</ul>")
        return "\n".join(result)

    html_output = convert_lists(text or "")
    html_output = re.sub(r"^### (.+)$", r"<h3>\1</h3>", html_output, flags=re.MULTILINE)
    html_output = re.sub(r"\[([^\]]+)\]\(([^)\s]+)\)", r'<a href="\2">\1</a>', html_output)
    html_output = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", html_output)
    html_output = re.sub(r"\*(\S(?:.*?\S)?)\*", r"<em>\1</em>", html_output)
    html_output = html_output.replace("\n", "<br>")
    html_output = re.sub(r"<br>\s*(<h3>)", r"\1", html_output)
    html_output = re.sub(r"(</h3>)\s*<br>", r"\1", html_output)
    html_output = re.sub(r"<br>(\s*<ul>)", r"\1", html_output)
    html_output = re.sub(r"(<ul>)<br>", r"\1", html_output)
    html_output = re.sub(r"</li><br><li>", r"</li><li>", html_output)
    html_output = re.sub(r"</li><br>(\s*</ul>)", r"</li>\1", html_output)
    html_output = re.sub(r"(</ul>)<br>", r"\1", html_output)
    return html_output.strip()


def _segment(tag: str, css_class: str, value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return f'<{tag} class="{css_class}">{value}</{tag}>'


def _article(kind: str, segments: Iterable[Optional[str]]) -> str:
    body = "\n".join(segment for segment in segments if segment)
    return f'<article class="feed feed-{kind}">\n{body}\n</article>'


def _inject(fragment: str, target: RenderTarget, sanitizer: Sanitizer) -> None:
    target.replace(sanitizer(fragment))


def render_weather(record: FeedRecord, target: RenderTarget, *, sanitizer: Sanitizer = sanitize_html) -> None:
    fragment = _article(
        "weather",
        [
            _segment("h2", "feed-title", record.get("title")),
            _segment("p", "feed-date", record.get("formattedDate")),
            _segment("div", "feed-body", record.get("body")),
            _segment("div", "feed-body feed-body-extra", record.get("body1")),
        ],
    )
    _inject(fragment, target, sanitizer)


def render_edb(record: FeedRecord, target: RenderTarget, *, sanitizer: Sanitizer = sanitize_html) -> None:
    fragment = _article(
        "edb",
        [
            _segment("h2", "feed-title feed-id", record.get("id")),
            _segment("p", "feed-date", record.get("formattedDate")),
            _segment("div", "feed-body", record.get("body")),
        ],
    )
    _inject(fragment, target, sanitizer)


def render_air_quality(record: FeedRecord, target: RenderTarget, *, sanitizer: Sanitizer = sanitize_html) -> None:
    fragment = _article(
        "aqi",
        [
            _segment("p", "feed-date", record.get("formattedDate")),
            _segment("div", "feed-body", record.get("body")),
            _segment("div", "feed-body feed-body-extra", record.get("body1")),
        ],
    )
    _inject(fragment, target, sanitizer)


def render_news(
    record: FeedRecord,
    target: RenderTarget,
    *,
    sanitizer: Sanitizer = sanitize_html,
    markdown: MarkdownConverter = markdown_to_html,
) -> None:
    """
    Render the news feed; `body` and `body1` are markdown and are expanded first.
    """
    body = record.get("body")
    body1 = record.get("body1")
    fragment = _article(
        "news",
        [
            _segment("h2", "feed-title", record.get("title")),
            _segment("p", "feed-date", record.get("formattedDate")),
            _segment("div", "feed-body", markdown(body) if isinstance(body, str) else body),
            _segment("div", "feed-body feed-body-extra", markdown(body1) if isinstance(body1, str) else body1),
        ],
    )
    _inject(fragment, target, sanitizer)


RENDERERS: Dict[str, Callable[..., None]] = {
    "weather": render_weather,
    "edb": render_edb,
    "aqi": render_air_quality,
    "news": render_news,
}


def render_feed(kind: str, record: FeedRecord, target: RenderTarget, **collaborators: Any) -> None:
    """
    Dispatch to the renderer for `kind`.

    Raises:
        ValueError: If `kind` has no renderer.
    """
    try:
        renderer = RENDERERS[kind]
    except KeyError:
        raise ValueError(f"No renderer for feed '{kind}'") from None
    renderer(record, target, **collaborators)


@dataclass
class DashboardPage:
    destination: Path
    kind: str
    content_html: str
    heading: Optional[str] = None


def _nav_links(current: Optional[str]) -> str:
    links = []
    for kind in FEED_KINDS:
        label = html.escape(FEED_TITLES[kind], quote=True)
        if kind == current:
            links.append(f'<span class="current">{label}</span>')
        else:
            links.append(f'<a href="{kind}.html">{label}</a>')
    return '<nav class="feed-nav"><a href="index.html">Home</a> | ' + " | ".join(links) + "</nav>"


def _html_document(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  {_STYLE_BLOCK}
</head>
<body>
{body}
<div class="footer-note">Data courtesy of the Dayline feed API.</div>
</body>
</html>
"""


def render_dashboard_page(page: DashboardPage) -> Path:
    """
    Write a feed's sanitized content area into a standalone HTML page.

    `content_html` must already be sanitized; only the page chrome is added here.
    """
    ensure_directory(page.destination.parent)
    heading = html.escape(page.heading or FEED_TITLES.get(page.kind, page.kind), quote=True)
    body = "\n".join(
        [
            _nav_links(page.kind),
            f"<h1>{heading}</h1>",
            f'<div id="content-area">{page.content_html}</div>',
        ]
    )
    write_text_file(page.destination, _html_document(heading, body))
    return page.destination


def render_index_page(destination: Path, kinds: Iterable[str]) -> Path:
    """Write the landing page linking to each built feed page."""
    ensure_directory(destination.parent)
    items = "\n".join(
        f'  <li><a href="{kind}.html">{html.escape(FEED_TITLES.get(kind, kind), quote=True)}</a></li>'
        for kind in kinds
    )
    body = "\n".join(
        [
            _nav_links(None),
            "<h1>Dayline</h1>",
            f'<ul class="feed-index">\n{items}\n</ul>',
        ]
    )
    write_text_file(destination, _html_document("Dayline", body))
    return destination


_STYLE_BLOCK = """<style>
body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif; background: #f8f9fa; color: #212529; margin: 1em auto; padding: 0 1em; max-width: 800px; line-height: 1.6; }
h1 { color: #343a40; border-bottom: 2px solid #dee2e6; padding-bottom: 0.5em; font-size: 1.8em; }
.feed-nav { font-size: 0.95em; margin-bottom: 1em; }
.feed-nav .current { font-weight: 600; }
#content-area article { background: #ffffff; padding: 1.5em 2em; border: 1px solid #dee2e6; border-radius: 6px; box-shadow: 0 2px 4px rgba(0,0,0,0.05); }
.feed-body { white-space: pre-wrap; word-wrap: break-word; margin-bottom: 1em; }
.feed-news .feed-body { white-space: normal; }
.feed-date { color: #6c757d; font-size: 0.9em; }
a { color: #0d6efd; text-decoration: none; }
a:hover { text-decoration: underline; }
.footer-note { margin-top: 2.5em; padding-top: 1em; border-top: 1px solid #dee2e6; font-size: 0.9em; color: #6c757d; text-align: center; }
@media (max-width: 600px) { body { margin: 0.5em; padding: 0 0.8em; } h1 { font-size: 1.5em; } #content-area article { padding: 1em 1.2em; } }
</style>"""
