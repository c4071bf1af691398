"""Tests for the recency, chronological and route views."""

import pytest

from blog_index.core.errors import ArticleNotFound
from blog_index.core.store import ContentStore
from blog_index.core.types import Article
from blog_index.index.navigation import (
    build_menu,
    chronological_articles,
    find_article,
    recent_articles,
    site_routes,
)


def _article(slug: str, date: str) -> Article:
    return Article(
        slug=slug,
        title=slug.upper(),
        subtitle="",
        url=f"/blog/{slug}.html",
        content="",
        date=date,
    )


def _store(*pairs: tuple[str, str]) -> ContentStore:
    return ContentStore({slug: _article(slug, date) for slug, date in pairs})


def test_chronological_orders_by_date_descending():
    store = _store(("a", "20230101"), ("b", "20220601"), ("c", "20231231"))

    dates = [article.date for article in chronological_articles(store)]

    assert dates == ["20231231", "20230101", "20220601"]


def test_chronological_keeps_store_order_for_equal_dates():
    store = _store(("b", "20230101"), ("a", "20230101"), ("c", "20240101"))

    assert [article.slug for article in chronological_articles(store)] == ["c", "a", "b"]


def test_recent_takes_first_entries_in_store_order_without_sorting():
    store = _store(
        ("a", "20200101"),
        ("b", "20200102"),
        ("c", "20200103"),
        ("d", "20200104"),
        ("e", "20200105"),
        ("f", "20240101"),
        ("g", "20250101"),
    )

    recent = [article.slug for article in recent_articles(store)]
    chronological = [article.slug for article in chronological_articles(store)][:5]

    assert recent == ["a", "b", "c", "d", "e"]
    assert chronological == ["g", "f", "e", "d", "c"]


def test_recent_with_fewer_articles_than_count():
    store = _store(("only", "20230101"))

    assert [article.slug for article in recent_articles(store, 5)] == ["only"]
    assert recent_articles(ContentStore(), 5) == []


def test_build_menu_sorts_latest_dropdown_by_date():
    store = _store(("a", "20200101"), ("b", "20230101"), ("c", "20210101"), ("z", "20990101"))

    home, latest = build_menu(store, count=3)

    assert (home.text, home.url, home.children) == ("Home", "/", ())
    assert (latest.text, latest.url) == ("Latest", "#")
    assert [article.slug for article in latest.children] == ["b", "c", "a"]


def test_site_routes_cover_home_and_every_slug():
    store = _store(("hello-world", "20230101"), ("another", "20230202"))

    routes = site_routes(store)

    assert routes[0].path == "/"
    assert routes[0].slug is None
    assert [(route.path, route.slug) for route in routes[1:]] == [
        ("/blog/another.html", "another"),
        ("/blog/hello-world.html", "hello-world"),
    ]
    for route in routes[1:]:
        assert route.slug in store


def test_find_article_missing_slug_raises_not_found():
    store = _store(("present", "20230101"))

    assert find_article(store, "present").slug == "present"
    with pytest.raises(ArticleNotFound):
        find_article(store, "absent")
    with pytest.raises(KeyError):
        find_article(store, "absent")
