"""
Command line interface for the Dayline dashboard.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .api import FEED_KINDS, FeedFetchError
from .config import ConfigError, Settings, get_settings
from .pipeline import DashboardReport, build_dashboard, refresh_feed, resolve_local_time
from .render import ContentArea

console = Console()
app = typer.Typer(help="Fetch, sanitize and publish the Dayline weather, environment and news feeds.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("DAYLINE_LOG_LEVEL")
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _validate_feed(value: str) -> str:
    kind = value.strip().lower()
    if kind not in FEED_KINDS:
        raise typer.BadParameter(f"Unknown feed '{value}'. Choose from: {', '.join(FEED_KINDS)}")
    return kind


def _validate_feeds(values: Optional[List[str]]) -> Optional[List[str]]:
    if not values:
        return values
    return [_validate_feed(value) for value in values]


def _settings_or_exit() -> Settings:
    try:
        return get_settings()
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _print_dashboard_report(report: DashboardReport) -> None:
    table = Table(title="Dashboard Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show dayline version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]dayline[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]dayline[/] is ready. Run [cyan]dayline show weather[/] or "
            "[cyan]dayline build --web-root site[/].",
        )


@app.command()
def show(
    feed: str = typer.Argument(
        ...,
        help="Feed to render (weather, edb, aqi, news).",
        callback=_validate_feed,
    ),
) -> None:
    """
    Fetch one feed and print its sanitized HTML.
    """
    _settings_or_exit()
    area = ContentArea()
    try:
        refresh_feed(feed, area, local_time=resolve_local_time())
    except FeedFetchError as exc:
        console.print(f"[bold red]Fetch failed:[/] {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(area.markup)


@app.command()
def build(
    web_root: Optional[Path] = typer.Option(
        None,
        "--web-root",
        "-o",
        help="Directory for the generated pages (defaults to DAYLINE_WEB_ROOT).",
    ),
    feed: List[str] = typer.Option(
        None,
        "--feed",
        "-f",
        help="Only build these feeds (multiple allowed).",
        callback=_validate_feeds,
    ),
) -> None:
    """
    Build a static page per feed plus an index page.
    """
    settings = _settings_or_exit()
    root = web_root or settings.web_root
    kinds = feed or list(FEED_KINDS)

    logger.info("Building %d feed page(s) in %s", len(kinds), root)
    report = build_dashboard(root, kinds)
    _print_dashboard_report(report)

    if report.failed:
        console.print("[bold red]Some feeds could not be fetched:[/]")
        for kind, reason in report.failed.items():
            console.print(f"- {kind}: {reason}")
    if not report.built:
        raise typer.Exit(code=1)
    console.print("[bold green]Dashboard updated.[/]")


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
