"""
Read-only views derived from a ContentStore.

All views are recomputed on every call from the store passed in; they hold
no state of their own.

Known limitation: ``recent_articles`` takes the first entries in store
iteration order (ascending slug) and does not sort by date first, so the
"latest" list can differ from the head of ``chronological_articles``.
"""

from __future__ import annotations

from ..core.errors import ArticleNotFound
from ..core.store import ContentStore
from ..core.types import Article, MenuItem, Route


DEFAULT_RECENT_COUNT = 5
HOME_ROUTE = Route(path="/")


def recent_articles(store: ContentStore, count: int = DEFAULT_RECENT_COUNT) -> list[Article]:
    """First ``count`` articles in store iteration order."""
    return [article for _, article in zip(range(count), store.values())]


def chronological_articles(store: ContentStore) -> list[Article]:
    """All articles, newest ``date`` first.

    Dates are compared as strings, which orders correctly because they are
    fixed width and zero padded. Equal dates keep store order.
    """
    return sorted(store.values(), key=lambda article: article.date, reverse=True)


def build_menu(store: ContentStore, count: int = DEFAULT_RECENT_COUNT) -> list[MenuItem]:
    """Top navigation: a Home link and a Latest dropdown.

    The dropdown holds the recency view re-ordered newest first.
    """
    latest = sorted(
        recent_articles(store, count), key=lambda article: article.date, reverse=True
    )
    return [
        MenuItem(text="Home", url="/"),
        MenuItem(text="Latest", url="#", children=tuple(latest)),
    ]


def site_routes(store: ContentStore) -> list[Route]:
    """Home route followed by one route per article of ``store``."""
    return [HOME_ROUTE] + [Route(path=article.url, slug=slug) for slug, article in store.items()]


def find_article(store: ContentStore, slug: str) -> Article:
    """Look up ``slug``, raising ArticleNotFound if the store lacks it."""
    if slug not in store:
        raise ArticleNotFound(slug)
    return store[slug]
