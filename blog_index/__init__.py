"""
Blog Index - content ingestion for a markdown blog.

This package turns a directory of dated markdown files
(``2023-05-01-my-post.md``) into an immutable, slug-keyed store of
rendered articles, plus the navigation views a site needs.

Example:
    >>> from blog_index import AppConfig, load_site, chronological_articles
    >>> result = load_site(AppConfig())
    >>> [a.slug for a in chronological_articles(result.store)]
"""

__all__ = [
    "__version__",
    "AppConfig",
    "Article",
    "ArticleNotFound",
    "BuildResult",
    "ContentStore",
    "StoreHolder",
    "build_menu",
    "chronological_articles",
    "find_article",
    "load_config",
    "load_site",
    "rebuild_site",
    "recent_articles",
    "site_routes",
]
__version__ = "0.1.0"

from .config import AppConfig, load_config
from .core import Article, ArticleNotFound, ContentStore, StoreHolder
from .index import (
    BuildResult,
    build_menu,
    chronological_articles,
    find_article,
    recent_articles,
    site_routes,
)
from .runner import load_site, rebuild_site
