"""
Command-line interface for inspecting the blog index.

Uses Typer to build the index from a content directory and print the
resulting views, so an operator can see which files failed to load before
the site is served.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import AppConfig, load_config
from .core.errors import ArticleNotFound, BlogIndexError
from .index.builder import BuildResult
from .index.navigation import (
    chronological_articles,
    find_article,
    recent_articles,
    site_routes,
)
from .logging_utils import setup_logging
from .runner import load_site

app = typer.Typer(add_completion=False)
console = Console()


def _prepare(
    config: Path | None,
    root: Path | None,
    strict: bool | None,
    log_level: str | None,
) -> AppConfig:
    try:
        cfg = load_config(str(config) if config else None)
    except BlogIndexError as exc:
        console.print(f"[red]Config error:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    # Override with CLI options
    if root is not None:
        cfg.content.root = str(root)
    if strict is not None:
        cfg.content.strict = strict
    if log_level:
        cfg.logging.level = log_level
    return cfg


def _build(cfg: AppConfig) -> BuildResult:
    logger = setup_logging(cfg.logging)
    try:
        return load_site(cfg, logger=logger)
    except BlogIndexError as exc:
        console.print(f"[red]Build failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc


ConfigOption = typer.Option(None, "--config", "-c", exists=True, help="YAML config file.")
RootOption = typer.Option(None, "--root", "-r", help="Content directory to scan.")
StrictOption = typer.Option(
    None, "--strict/--no-strict", help="Abort on the first file that fails to load."
)
LogLevelOption = typer.Option(None, "--log-level", help="Logging level.")


@app.command()
def build(
    config: Path | None = ConfigOption,
    root: Path | None = RootOption,
    strict: bool | None = StrictOption,
    log_level: str | None = LogLevelOption,
):
    """Build the index and print every article, newest first.

    Exits with status 1 when any content file failed to load.
    """
    cfg = _prepare(config, root, strict, log_level)
    result = _build(cfg)

    table = Table(title=f"{len(result.store)} articles")
    table.add_column("Date")
    table.add_column("Slug")
    table.add_column("Title")
    for article in chronological_articles(result.store):
        table.add_row(article.date, article.slug, article.title)
    console.print(table)

    latest = recent_articles(result.store, cfg.content.recent_count)
    console.print("Latest: " + ", ".join(article.slug for article in latest))

    for collision in result.collisions:
        console.print(
            f"[yellow]Slug {collision.slug!r}:[/yellow] {collision.winner} replaced {collision.replaced}"
        )

    if result.failures:
        failures = Table(title=f"{len(result.failures)} failed", style="red")
        failures.add_column("File")
        failures.add_column("Stage")
        failures.add_column("Error")
        for failure in result.failures:
            failures.add_row(str(failure.path), failure.stage, failure.message)
        console.print(failures)
        raise typer.Exit(code=1)


@app.command()
def routes(
    config: Path | None = ConfigOption,
    root: Path | None = RootOption,
    log_level: str | None = LogLevelOption,
):
    """Print the site's route list."""
    cfg = _prepare(config, root, None, log_level)
    result = _build(cfg)
    for route in site_routes(result.store):
        console.print(route.path)


@app.command()
def show(
    slug: str = typer.Argument(..., help="Slug of the article to show."),
    config: Path | None = ConfigOption,
    root: Path | None = RootOption,
    html: bool = typer.Option(False, "--html", help="Also print the rendered HTML."),
    log_level: str | None = LogLevelOption,
):
    """Print one article's metadata."""
    cfg = _prepare(config, root, None, log_level)
    result = _build(cfg)
    try:
        article = find_article(result.store, slug)
    except ArticleNotFound as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(f"title: {article.title}")
    console.print(f"subtitle: {article.subtitle}")
    console.print(f"date: {article.date}")
    console.print(f"url: {article.url}")
    if html:
        console.print(article.content, markup=False)


if __name__ == "__main__":
    app()
