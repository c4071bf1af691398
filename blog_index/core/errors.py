"""Exception hierarchy for the blog index."""

from __future__ import annotations

from pathlib import Path


class BlogIndexError(Exception):
    """Base class for all errors raised by blog_index."""


class ConfigError(BlogIndexError):
    """Raised when a configuration file or value is invalid."""


class FrontMatterError(BlogIndexError):
    """Raised when a front matter header cannot be decoded."""


class IngestError(BlogIndexError):
    """Raised in strict mode when a single content file fails to load.

    Attributes:
        path: The content file that failed
        stage: Pipeline stage that failed ("read" or "front_matter")
    """

    def __init__(self, path: Path, stage: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.stage = stage


class ArticleNotFound(BlogIndexError, KeyError):
    """Raised when a slug is looked up that the store does not contain."""

    def __init__(self, slug: str):
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"no article with slug {self.slug!r}"
