"""
Markdown to HTML rendering.

Wraps a markdown-it-py parser configured with the extensions a blog post
typically needs. Rendering is pure: the same text always yields the same
HTML and nothing outside the returned string is touched.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, Iterable

from markdown_it import MarkdownIt
from mdit_py_emoji import emoji_plugin
from mdit_py_plugins.attrs import attrs_plugin
from mdit_py_plugins.container import container_plugin
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from ..core.errors import ConfigError


DEFAULT_EXTENSIONS = (
    "table",
    "strikethrough",
    "linkify",
    "footnote",
    "tasklists",
    "deflist",
    "math",
    "attrs",
    "container",
    "emoji",
)


def _any_container(params: str, *args) -> bool:
    return bool(params.strip())


def _render_container(self, tokens, idx, options, env):
    token = tokens[idx]
    if token.nesting == 1:
        css_class = token.info.strip().split(" ", 1)[0]
        if css_class:
            token.attrJoin("class", css_class)
    return self.renderToken(tokens, idx, options, env)


def _use_container(md: MarkdownIt) -> None:
    # ":::note" ... ":::" renders as <div class="note">
    container_plugin(md, "custom", validate=_any_container, render=_render_container)


_PLUGINS: dict[str, Callable[[MarkdownIt], None]] = {
    "footnote": lambda md: md.use(footnote_plugin),
    "tasklists": lambda md: md.use(tasklists_plugin),
    "deflist": lambda md: md.use(deflist_plugin),
    "math": lambda md: md.use(dollarmath_plugin),
    "attrs": lambda md: md.use(attrs_plugin),
    "container": _use_container,
    "emoji": lambda md: md.use(emoji_plugin),
}
# Built into markdown-it; "linkify" also needs the option set at construction.
_CORE_RULES = ("table", "strikethrough", "linkify")


class MarkdownRenderer:
    """Callable markdown renderer.

    Attributes:
        extensions: Names of the enabled extensions, in the order applied
    """

    def __init__(self, extensions: Iterable[str] = DEFAULT_EXTENSIONS, html: bool = True):
        self.extensions = tuple(extensions)
        unknown = [
            name for name in self.extensions if name not in _PLUGINS and name not in _CORE_RULES
        ]
        if unknown:
            raise ConfigError(f"unknown markdown extensions: {', '.join(unknown)}")

        self._md = MarkdownIt(
            "commonmark", {"html": html, "linkify": "linkify" in self.extensions}
        )
        for name in self.extensions:
            if name in _CORE_RULES:
                self._md.enable(name)
            else:
                _PLUGINS[name](self._md)

    def render(self, text: str) -> str:
        return self._md.render(text)

    __call__ = render


@lru_cache(maxsize=1)
def default_renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


def render_markdown(text: str) -> str:
    """Render ``text`` with the default extension set."""
    return default_renderer().render(text)
