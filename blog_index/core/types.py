"""
Core data types for the blog index.

This module defines the records that flow through the ingestion pipeline:
- FilenameMatch: Date and slug parsed from a content filename
- FrontMatter: Metadata decoded from a file's header block
- Article: A fully built entry of the content store
- IngestFailure / SlugCollision: Per-file outcomes reported after a build
- MenuItem / Route: Navigation records handed to the presentation layer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class FilenameMatch:
    """Components parsed from a `<year>-<month>-<day>-<slug>.<ext>` filename.

    Only lives for the duration of a build; never stored.

    Attributes:
        path: Full path to the content file
        slug: Filename remainder after the three numeric groups
        year: First numeric group, unvalidated
        month: Second numeric group, unvalidated (13 is accepted)
        day: Third numeric group, unvalidated
        extension: Extension without the leading dot
    """

    path: Path
    slug: str
    year: int
    month: int
    day: int
    extension: str

    @property
    def stem(self) -> str:
        return self.path.name[: -(len(self.extension) + 1)]

    @property
    def date(self) -> str:
        """Fixed-width sortable date token, e.g. ``20230501``."""
        return f"{self.year:04d}{self.month:02d}{self.day:02d}"


@dataclass(frozen=True)
class FrontMatter:
    """Decoded front matter header.

    Attributes:
        title: Article title, empty when absent or null
        subtitle: Article subtitle, empty when absent or null
        extra: Any other top-level keys, scalars normalized to strings
    """

    title: str = ""
    subtitle: str = ""
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Article:
    """A single blog article as exposed by the content store.

    Attributes:
        slug: Unique lookup key derived from the filename
        title: Title from front matter
        subtitle: Subtitle from front matter
        url: Public URL, a pure function of the slug
        content: Rendered HTML of the body
        date: Zero-padded ``YYYYMMDD`` sort token (not a validated date)
        meta: Read-only view of any other front matter keys
    """

    slug: str
    title: str
    subtitle: str
    url: str
    content: str
    date: str
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class IngestFailure:
    """A content file that was skipped because it could not be loaded."""

    path: Path
    stage: str
    message: str


@dataclass(frozen=True)
class SlugCollision:
    """Two files produced the same slug; ``winner`` replaced ``replaced``."""

    slug: str
    replaced: Path
    winner: Path


@dataclass(frozen=True)
class MenuItem:
    text: str
    url: str
    children: tuple[Article, ...] = ()


@dataclass(frozen=True)
class Route:
    """A servable path. ``slug`` is None for the home route."""

    path: str
    slug: str | None = None
