"""Body rendering."""

from .markdown import DEFAULT_EXTENSIONS, MarkdownRenderer, default_renderer, render_markdown

__all__ = ["DEFAULT_EXTENSIONS", "MarkdownRenderer", "default_renderer", "render_markdown"]
