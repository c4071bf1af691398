"""Discovery of candidate content files under the content root."""

from __future__ import annotations

import logging
from pathlib import Path

from ..logging_utils import log_event


def scan_content_files(
    root: Path, extension: str = ".md", logger: logging.Logger | None = None
) -> list[Path]:
    """Recursively list files under ``root`` whose name ends with ``extension``.

    A missing root is not fatal: a warning is logged and an empty list is
    returned so that ingestion can proceed with an empty store. The returned
    order is whatever the filesystem yields.
    """
    logger = logger or logging.getLogger("blog_index")
    if not root.is_dir():
        logger.warning("the content folder (%s) does not exist", root)
        return []

    paths = [path for path in root.rglob(f"*{extension}") if path.is_file()]
    log_event(logger, "Content files found", event="scan", root=str(root), count=len(paths))
    return paths
