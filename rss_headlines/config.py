"""Configuration loading for rss_headlines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from xml.etree import ElementTree as ET

from .models import SourceEntry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: Optional[str] = None


@dataclass
class AppConfig:
    sources_file: Optional[str] = None
    timeout: Optional[float] = DEFAULT_TIMEOUT
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def parse_sources_config(path: str) -> List[SourceEntry]:
    """Parse an OPML file and return the news sources in document order."""
    logger.info("Loading news sources from %s", path)
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise ValueError(f"Source list {path} is not valid XML: {exc}")
    body = root.find("body")
    sources: List[SourceEntry] = []

    def walk(outline: ET.Element) -> None:
        name = outline.attrib.get("text") or outline.attrib.get("title")
        feed_url = outline.attrib.get("xmlUrl")

        if outline.attrib.get("type") == "rss" and feed_url:
            sources.append(SourceEntry(name=name or feed_url, url=feed_url))
            logger.debug("Registered source '%s' (%s)", sources[-1].name, feed_url)
            return

        for child in outline.findall("outline"):
            walk(child)

    if body is None:
        raise ValueError(f"{path} is missing the <body> section.")

    for outline in body.findall("outline"):
        walk(outline)

    logger.info("Loaded %d news sources", len(sources))
    return sources


def _resolve_path(base_path: Path, target_path: str) -> str:
    """Resolve a path relative to the base config file if it's not absolute."""
    target = Path(target_path)
    if target.is_absolute():
        return str(target)
    return str((base_path.parent / target).resolve())


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    value = raw.strip().lower()
    if value == "none":
        return None
    try:
        seconds = float(value)
    except ValueError:
        raise ValueError(f"Invalid <timeout> value: {raw!r}")
    if seconds < 0:
        raise ValueError("<timeout> must not be negative.")
    return seconds or None


def parse_app_config(path: str) -> AppConfig:
    """Parse the main application configuration XML."""
    config_path = Path(path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    logger.info("Loading application configuration from %s", config_path)
    try:
        root = ET.parse(config_path).getroot()
    except ET.ParseError as exc:
        raise ValueError(f"Config file {path} is not valid XML: {exc}")

    sources_text = root.findtext("sources")
    sources_file = (
        _resolve_path(config_path, sources_text.strip())
        if sources_text and sources_text.strip()
        else None
    )

    timeout = _parse_timeout(root.findtext("timeout"))

    log_node = root.find("logging")
    logging_config = LoggingConfig()
    if log_node is not None:
        logging_config.level = log_node.findtext("level", "WARNING")
        log_file = log_node.findtext("file")
        if log_file:
            logging_config.file = _resolve_path(config_path, log_file)

    return AppConfig(
        sources_file=sources_file,
        timeout=timeout,
        logging=logging_config,
    )
