"""Tests for folding content files into the store."""

from pathlib import Path

import pytest

from blog_index.core.errors import IngestError
from blog_index.index.builder import article_url, build_index, load_article
from blog_index.input.filename import parse_filename


def _fake_render(text: str) -> str:
    return f"<p>{text.strip()}</p>"


def _write(path: Path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    match = parse_filename(path)
    assert match is not None
    return match


def test_article_url_from_slug():
    assert article_url("hello-world") == "/blog/hello-world.html"
    assert article_url("hello-world", "/posts/") == "/posts/hello-world.html"


def test_load_article_builds_all_fields(tmp_path: Path):
    match = _write(
        tmp_path / "2023-05-01-hello-world.md",
        "---\ntitle: Hello\nsubtitle: World\n---\nFirst post.\n",
    )

    article = load_article(match, _fake_render)

    assert article.slug == "hello-world"
    assert article.title == "Hello"
    assert article.subtitle == "World"
    assert article.url == "/blog/hello-world.html"
    assert article.content == "<p>First post.</p>"
    assert article.date == "20230501"


def test_load_article_without_front_matter(tmp_path: Path):
    match = _write(tmp_path / "2022-12-31-plain.md", "Just a body.\n")

    article = load_article(match, _fake_render)

    assert article.title == ""
    assert article.subtitle == ""
    assert article.content == "<p>Just a body.</p>"


def test_build_index_last_write_wins_on_slug_collision(tmp_path: Path):
    first = _write(tmp_path / "a" / "2023-01-01-dup.md", "---\ntitle: First\n---\none")
    second = _write(tmp_path / "b" / "2024-02-02-dup.md", "---\ntitle: Second\n---\ntwo")

    result = build_index([first, second], _fake_render)

    assert list(result.store) == ["dup"]
    assert result.store["dup"].title == "Second"
    assert result.store["dup"].date == "20240202"
    assert result.store["dup"].content == "<p>two</p>"
    assert len(result.collisions) == 1
    assert result.collisions[0].replaced == first.path
    assert result.collisions[0].winner == second.path

    reversed_result = build_index([second, first], _fake_render)
    assert reversed_result.store["dup"].title == "First"


def test_build_index_skips_malformed_front_matter(tmp_path: Path):
    good = _write(tmp_path / "2023-01-01-good.md", "---\ntitle: Good\n---\nok")
    bad = _write(tmp_path / "2023-01-02-bad.md", "---\ntitle: [unclosed\n---\nbroken")

    result = build_index([bad, good], _fake_render)

    assert list(result.store) == ["good"]
    assert not result.ok
    assert len(result.failures) == 1
    assert result.failures[0].path == bad.path
    assert result.failures[0].stage == "front_matter"


def test_build_index_records_unreadable_file(tmp_path: Path):
    match = _write(tmp_path / "2023-01-01-binary.md", "placeholder")
    match.path.write_bytes(b"\xff\xfe\x00invalid")

    result = build_index([match], _fake_render)

    assert len(result.store) == 0
    assert result.failures[0].stage == "read"


def test_build_index_strict_aborts_on_first_failure(tmp_path: Path):
    good = _write(tmp_path / "2023-01-01-good.md", "ok")
    bad = _write(tmp_path / "2023-01-02-bad.md", "---\nnot: [valid\n---\n")

    with pytest.raises(IngestError) as excinfo:
        build_index([good, bad], _fake_render, strict=True)

    assert excinfo.value.path == bad.path
    assert excinfo.value.stage == "front_matter"


def test_build_index_empty_input():
    result = build_index([], _fake_render)

    assert len(result.store) == 0
    assert result.ok
    assert result.collisions == []


def test_load_article_exposes_extra_front_matter(tmp_path: Path):
    match = _write(
        tmp_path / "2023-05-01-tagged.md",
        "---\ntitle: Tagged\nauthor: ~\nlayout: post\ntags: [a, b]\n---\nbody\n",
    )

    article = load_article(match, _fake_render)

    assert dict(article.meta) == {"author": "", "layout": "post", "tags": ["a", "b"]}
    assert "title" not in article.meta
    with pytest.raises(TypeError):
        article.meta["layout"] = "page"  # type: ignore[index]


def test_load_article_without_extras_has_empty_meta(tmp_path: Path):
    match = _write(tmp_path / "2023-05-01-bare.md", "---\ntitle: Bare\n---\nbody\n")

    assert dict(load_article(match, _fake_render).meta) == {}


def test_build_index_renders_markdown_by_default(tmp_path: Path):
    match = _write(tmp_path / "2023-05-01-md.md", "---\ntitle: Md\n---\n*emphasis*\n")

    result = build_index([match])

    assert "<em>emphasis</em>" in result.store["md"].content
