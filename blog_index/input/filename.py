"""
Filename grammar for dated content files.

Content files are named ``<year>-<month>-<day>-<slug>.<ext>``, e.g.
``2023-05-01-my-long-title.md``. The slug may itself contain hyphens.
Numeric groups are plain base-10 integers and are not checked against a
calendar, so ``2023-13-40-x.md`` is accepted as month 13, day 40.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from ..core.types import FilenameMatch


@lru_cache(maxsize=None)
def _filename_re(extension: str) -> re.Pattern[str]:
    ext = extension.lstrip(".")
    return re.compile(rf"([0-9]+)-([0-9]+)-([0-9]+)-(.+)\.({re.escape(ext)})")


def parse_filename(path: Path, extension: str = ".md") -> FilenameMatch | None:
    """Parse a content file path into its date and slug components.

    Args:
        path: Path to the file; only its final component is inspected
        extension: Content extension, with or without the leading dot

    Returns:
        A FilenameMatch, or None when the filename does not follow the grammar
    """
    match = _filename_re(extension).fullmatch(path.name)
    if match is None:
        return None
    year, month, day, slug, ext = match.groups()
    return FilenameMatch(
        path=path,
        slug=slug,
        year=int(year),
        month=int(month),
        day=int(day),
        extension=ext,
    )
