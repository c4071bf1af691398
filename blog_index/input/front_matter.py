"""
Front matter handling for content files.

A content file may start with a YAML header block::

    ---
    title: Hello
    subtitle: A first post
    ---
    Markdown body...

Splitting looks for a single delimiter line and treats it as the closing
marker. When the text opens with ``---`` the search starts past it, so the
usual two-delimiter layout works; a file with no opening delimiter but a
``---`` line further down is still split at that line.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

from ..core.errors import FrontMatterError
from ..core.types import FrontMatter


DELIMITER = "---"
# A line starting with three dashes; the line terminator is consumed.
DELIMITER_RE = re.compile(r"^---[^\r\n]*(?:\r?\n|\Z)", re.MULTILINE)

KNOWN_FIELDS = ("title", "subtitle")


def split_front_matter(text: str, require_opening: bool = False) -> tuple[str, str]:
    """Split raw file text into ``(header, body)``.

    Args:
        text: Raw content of the file
        require_opening: Only split when the text begins with a delimiter

    Returns:
        The header text and the body text. The delimiter line itself belongs
        to neither. Without a delimiter the header is empty and the body is
        the whole text.
    """
    opened = text.startswith(DELIMITER)
    if require_opening and not opened:
        return "", text

    search_from = len(DELIMITER) if opened else 0
    match = DELIMITER_RE.search(text, search_from)
    if match is None:
        return "", text

    header_start = text.find("\n") + 1 if opened else 0
    return text[header_start : match.start()], text[match.end() :]


def decode_front_matter(header: str) -> FrontMatter:
    """Decode a YAML header into a FrontMatter record.

    Raises:
        FrontMatterError: The header is not valid YAML, is not a mapping, or
            holds a non-scalar value for a known field
    """
    if not header.strip():
        return FrontMatter()

    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"invalid YAML: {exc}") from exc

    if data is None:
        return FrontMatter()
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"front matter must be a mapping, got {type(data).__name__}"
        )

    fields = {name: _scalar_to_str(name, data.get(name)) for name in KNOWN_FIELDS}
    extra = {
        str(key): _normalize_extra(value)
        for key, value in data.items()
        if key not in KNOWN_FIELDS
    }
    return FrontMatter(extra=extra, **fields)


def _scalar_to_str(name: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, dict)):
        raise FrontMatterError(f"field {name!r} must be a scalar")
    return str(value)


def _normalize_extra(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (list, dict)):
        return value
    return str(value)
