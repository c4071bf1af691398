"""Immutable content store and the holder that publishes it.

A ContentStore is built once per ingestion run and never mutated. Rebuilding
produces a brand new store which StoreHolder swaps in with a single reference
assignment, so readers always see either the old or the new snapshot.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterator

from .errors import ArticleNotFound
from .types import Article


class ContentStore(Mapping):
    """Read-only mapping from slug to Article.

    Iteration order is ascending slug order regardless of the order in which
    articles were added.
    """

    def __init__(self, articles: Mapping[str, Article] | None = None):
        ordered = {slug: articles[slug] for slug in sorted(articles or {})}
        self._articles = MappingProxyType(ordered)

    def __getitem__(self, slug: str) -> Article:
        try:
            return self._articles[slug]
        except KeyError:
            raise ArticleNotFound(slug) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._articles)

    def __len__(self) -> int:
        return len(self._articles)

    def __repr__(self) -> str:
        return f"ContentStore({len(self)} articles)"


class StoreHolder:
    """Holds the currently published ContentStore.

    ``current`` never blocks; ``swap`` publishes with one assignment.
    """

    def __init__(self, store: ContentStore | None = None):
        self._store = store if store is not None else ContentStore()
        self._lock = threading.Lock()

    @property
    def current(self) -> ContentStore:
        return self._store

    def swap(self, store: ContentStore) -> ContentStore:
        """Publish ``store`` and return the snapshot it replaced."""
        with self._lock:
            previous, self._store = self._store, store
        return previous

