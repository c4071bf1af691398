"""
Assembly of the content store from parsed content files.

Each FilenameMatch is turned into an Article by reading the file, splitting
and decoding its front matter, and rendering its body. Articles are folded
into a slug-keyed dict; when two files share a slug the one processed later
replaces the earlier one.

Failures are per file: an unreadable file or malformed front matter is
recorded as an IngestFailure and skipped, unless ``strict`` is set, in which
case the first failure aborts the whole build.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable

from ..core.errors import FrontMatterError, IngestError
from ..core.store import ContentStore
from ..core.types import Article, FilenameMatch, IngestFailure, SlugCollision
from ..input.front_matter import decode_front_matter, split_front_matter
from ..logging_utils import log_event
from ..render.markdown import render_markdown


DEFAULT_URL_PREFIX = "/blog/"


@dataclass
class BuildResult:
    """Outcome of a single ingestion run.

    Attributes:
        store: The newly built content store
        failures: Files skipped because they could not be loaded
        collisions: Slug overwrites, in processing order
        scanned: Number of candidate files found on disk
        skipped: Number of candidates whose filename did not match the grammar
    """

    store: ContentStore
    failures: list[IngestFailure] = field(default_factory=list)
    collisions: list[SlugCollision] = field(default_factory=list)
    scanned: int = 0
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures


def article_url(slug: str, url_prefix: str = DEFAULT_URL_PREFIX) -> str:
    """Public URL of the article with ``slug``."""
    return f"{url_prefix}{slug}.html"


def load_article(
    match: FilenameMatch,
    render: Callable[[str], str] = render_markdown,
    url_prefix: str = DEFAULT_URL_PREFIX,
    require_opening: bool = False,
) -> Article:
    """Build one Article from a parsed content file.

    Raises:
        OSError: The file cannot be read
        UnicodeDecodeError: The file is not valid UTF-8
        FrontMatterError: The header block cannot be decoded
    """
    text = match.path.read_text(encoding="utf-8")
    header, body = split_front_matter(text, require_opening=require_opening)
    meta = decode_front_matter(header)
    return Article(
        slug=match.slug,
        title=meta.title,
        subtitle=meta.subtitle,
        url=article_url(match.slug, url_prefix),
        content=render(body),
        date=match.date,
        meta=MappingProxyType(dict(meta.extra)),
    )


def build_index(
    matches: Iterable[FilenameMatch],
    render: Callable[[str], str] = render_markdown,
    *,
    url_prefix: str = DEFAULT_URL_PREFIX,
    strict: bool = False,
    require_opening: bool = False,
    logger: logging.Logger | None = None,
) -> BuildResult:
    """Fold parsed content files into a new ContentStore.

    Args:
        matches: Parsed files, in processing order
        render: Markdown to HTML converter applied to each body
        url_prefix: Prefix of every article URL
        strict: Raise IngestError on the first failing file
        require_opening: Passed through to split_front_matter
        logger: Logger for per-file events

    Returns:
        A BuildResult; ``scanned`` and ``skipped`` are left for the caller
    """
    logger = logger or logging.getLogger("blog_index")
    articles: dict[str, Article] = {}
    sources: dict[str, FilenameMatch] = {}
    failures: list[IngestFailure] = []
    collisions: list[SlugCollision] = []

    for match in matches:
        logger.debug("Found file: %s", match.stem)
        try:
            article = load_article(match, render, url_prefix, require_opening)
        except (OSError, UnicodeDecodeError) as exc:
            _record_failure(failures, match, "read", exc, strict, logger)
            continue
        except FrontMatterError as exc:
            _record_failure(failures, match, "front_matter", exc, strict, logger)
            continue

        previous = sources.get(article.slug)
        if previous is not None:
            collisions.append(
                SlugCollision(slug=article.slug, replaced=previous.path, winner=match.path)
            )
            log_event(
                logger,
                "Slug overwritten",
                event="slug_collision",
                slug=article.slug,
                replaced=str(previous.path),
                winner=str(match.path),
            )
        articles[article.slug] = article
        sources[article.slug] = match

    return BuildResult(store=ContentStore(articles), failures=failures, collisions=collisions)


def _record_failure(
    failures: list[IngestFailure],
    match: FilenameMatch,
    stage: str,
    exc: Exception,
    strict: bool,
    logger: logging.Logger,
) -> None:
    if strict:
        raise IngestError(match.path, stage, str(exc)) from exc
    failures.append(IngestFailure(path=match.path, stage=stage, message=str(exc)))
    logger.warning("Skipping %s (%s): %s", match.path, stage, exc)
