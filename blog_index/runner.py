"""
Ingestion pipeline orchestration.

This module coordinates a full build of the content store:
1. Scan the content root for candidate files
2. Parse dates and slugs out of their filenames
3. Load, decode and render every matching file
4. Report failures and slug collisions

``rebuild_site`` runs the same build and publishes the result through a
StoreHolder, replacing the previous snapshot wholesale.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from .config import AppConfig
from .core.store import StoreHolder
from .core.types import FilenameMatch
from .index.builder import BuildResult, build_index
from .input.filename import parse_filename
from .input.scanner import scan_content_files
from .logging_utils import log_event
from .render.markdown import MarkdownRenderer


def collect_matches(
    paths: list[Path], extension: str, logger: logging.Logger
) -> tuple[list[FilenameMatch], int]:
    """Parse each path's filename, returning matches and the skipped count."""
    matches: list[FilenameMatch] = []
    skipped = 0
    for path in paths:
        match = parse_filename(path, extension)
        if match is None:
            logger.debug("Ignoring %s: not a dated content file", path.name)
            skipped += 1
            continue
        matches.append(match)
    return matches, skipped


def load_site(
    cfg: AppConfig,
    logger: logging.Logger | None = None,
    render: Callable[[str], str] | None = None,
) -> BuildResult:
    """Build a new content store from the configured content root.

    Args:
        cfg: Application configuration
        logger: Logger for progress and failure reporting
        render: Markdown converter; built from ``cfg.markdown`` if None

    Returns:
        The BuildResult, including any per-file failures

    Raises:
        IngestError: A file failed to load and ``cfg.content.strict`` is set
    """
    logger = logger or logging.getLogger("blog_index")
    content = cfg.content
    root = Path(content.root)
    log_event(logger, "Build start", event="build_start", root=str(root))

    paths = scan_content_files(root, content.extension, logger)
    matches, skipped = collect_matches(paths, content.extension, logger)
    if render is None:
        render = MarkdownRenderer(cfg.markdown.extensions, html=cfg.markdown.html)

    result = build_index(
        matches,
        render,
        url_prefix=content.url_prefix,
        strict=content.strict,
        require_opening=content.require_opening_delimiter,
        logger=logger,
    )
    result.scanned = len(paths)
    result.skipped = skipped

    log_event(
        logger,
        "Build complete",
        event="build_complete",
        articles=len(result.store),
        scanned=result.scanned,
        skipped=result.skipped,
        failed=len(result.failures),
        collisions=len(result.collisions),
    )
    if result.failures:
        logger.warning(
            "%d file(s) failed to load:\n%s",
            len(result.failures),
            format_failures(result),
        )
    return result


def rebuild_site(
    holder: StoreHolder,
    cfg: AppConfig,
    logger: logging.Logger | None = None,
    render: Callable[[str], str] | None = None,
) -> BuildResult:
    """Build from scratch and publish the new store through ``holder``.

    If the build raises, the previously published store stays in place.
    """
    result = load_site(cfg, logger=logger, render=render)
    holder.swap(result.store)
    return result


def format_failures(result: BuildResult) -> str:
    return "\n".join(
        f"  {failure.path} [{failure.stage}] {failure.message}" for failure in result.failures
    )
