"""Index assembly and navigation views."""

from .builder import BuildResult, article_url, build_index, load_article
from .navigation import (
    build_menu,
    chronological_articles,
    find_article,
    recent_articles,
    site_routes,
)

__all__ = [
    "BuildResult",
    "article_url",
    "build_index",
    "build_menu",
    "chronological_articles",
    "find_article",
    "load_article",
    "recent_articles",
    "site_routes",
]
