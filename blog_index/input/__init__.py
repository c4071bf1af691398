"""
Input parsing utilities.

This package contains code for discovering content files and parsing
their filenames and front matter.
"""

from .filename import parse_filename
from .front_matter import decode_front_matter, split_front_matter
from .scanner import scan_content_files

__all__ = [
    "decode_front_matter",
    "parse_filename",
    "scan_content_files",
    "split_front_matter",
]
