"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- ContentConfig: Content directory, filename and URL settings
- MarkdownConfig: Markdown rendering settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

import yaml

from .core.errors import ConfigError
from .render.markdown import DEFAULT_EXTENSIONS


@dataclass
class ContentConfig:
    """Configuration for content discovery and indexing.

    Attributes:
        root: Directory scanned recursively for content files
        extension: Content file extension, including the dot
        url_prefix: Prefix of every article URL
        recent_count: Number of entries in the recency view
        strict: Abort the whole build on the first file that fails to load
        require_opening_delimiter: Only treat a header as front matter when
            the file starts with "---"
    """

    root: str = "posts"
    extension: str = ".md"
    url_prefix: str = "/blog/"
    recent_count: int = 5
    strict: bool = False
    require_opening_delimiter: bool = False


@dataclass
class MarkdownConfig:
    """Configuration for markdown rendering.

    Attributes:
        html: Whether raw HTML in posts is passed through
        extensions: Enabled extensions, see blog_index.render.markdown
    """

    html: bool = True
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Path of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "blog_index.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    content: ContentConfig = field(default_factory=ContentConfig)
    markdown: MarkdownConfig = field(default_factory=MarkdownConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    "content": ContentConfig,
    "markdown": MarkdownConfig,
    "logging": LoggingConfig,
}


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if not isinstance(value, dict):
            raise ConfigError(f"section {key!r} must be a mapping")
        unknown = set(value) - set(data[key])
        if unknown:
            raise ConfigError(f"unknown keys in {key!r}: {', '.join(sorted(unknown))}")
        _check_types(key, _SECTIONS[key], value)
        data[key].update(value)
    return _fromdict(data)


# Annotations are strings under `from __future__ import annotations`.
_TYPES: dict[str, type] = {"str": str, "int": int, "bool": bool, "list[str]": list}


def _check_types(section: str, cls: type, values: dict[str, Any]) -> None:
    """Raise ConfigError when a value does not match its field annotation."""
    annotations = {f.name: f.type for f in fields(cls)}
    for name, value in values.items():
        expected = _TYPES[annotations[name]]
        # bool is an int subclass; keep "true" out of numeric fields
        if isinstance(value, bool) and expected is not bool:
            ok = False
        else:
            ok = isinstance(value, expected)
        if ok and expected is list:
            ok = all(isinstance(item, str) for item in value)
        if not ok:
            raise ConfigError(
                f"{section}.{name} must be {annotations[name]}, got {type(value).__name__}"
            )


def _asdict(cfg: AppConfig) -> dict[str, dict[str, Any]]:
    """Convert AppConfig to nested dictionary."""
    return {
        name: {f.name: getattr(getattr(cfg, name), f.name) for f in fields(section)}
        for name, section in _SECTIONS.items()
    }


def _fromdict(data: dict[str, dict[str, Any]]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        content=ContentConfig(**data["content"]),
        markdown=MarkdownConfig(**data["markdown"]),
        logging=LoggingConfig(**data["logging"]),
    )
