"""
Core domain models.

This package contains the data types, errors and the immutable content
store shared by every pipeline stage.
"""

from .errors import (
    ArticleNotFound,
    BlogIndexError,
    ConfigError,
    FrontMatterError,
    IngestError,
)
from .store import ContentStore, StoreHolder
from .types import (
    Article,
    FilenameMatch,
    FrontMatter,
    IngestFailure,
    MenuItem,
    Route,
    SlugCollision,
)

__all__ = [
    "Article",
    "ArticleNotFound",
    "BlogIndexError",
    "ConfigError",
    "ContentStore",
    "FilenameMatch",
    "FrontMatter",
    "FrontMatterError",
    "IngestError",
    "IngestFailure",
    "MenuItem",
    "Route",
    "SlugCollision",
    "StoreHolder",
]
