"""Feed download, parsing and projection into display records."""

from __future__ import annotations

import logging
import xml.sax
from typing import Any, List, Optional

import feedparser
import requests

from .config import DEFAULT_TIMEOUT
from .errors import MissingTitleError, NetworkError, ParseError
from .models import NO_DESCRIPTION, NO_LINK, DisplayRecord, FeedItem, ParsedChannel

logger = logging.getLogger(__name__)


def fetch_feed(url: str, timeout: Optional[float] = DEFAULT_TIMEOUT) -> bytes:
    """Download the raw feed document at ``url``."""
    logger.info("Fetching feed %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        content = response.content
    except requests.RequestException as exc:
        logger.debug("Request to %s failed", url, exc_info=True)
        raise NetworkError(url, exc) from exc

    logger.debug("Downloaded %d bytes from %s", len(content), url)
    return content


def parse_feed(content: bytes) -> ParsedChannel:
    """Parse ``content`` as an RSS/Atom document."""
    parsed = feedparser.parse(
        content, sanitize_html=False, resolve_relative_uris=False
    )

    if parsed.get("bozo"):
        exc = parsed.get("bozo_exception")
        if isinstance(exc, xml.sax.SAXException):
            raise ParseError(f"malformed feed document: {exc}")
        logger.debug("Ignoring recoverable feed problem: %s", exc)

    if not parsed.get("version"):
        raise ParseError("document is not a recognised RSS or Atom feed")

    if not parsed.feed and not parsed.entries:
        raise ParseError("document has no channel or feed element")

    items = [_to_item(entry) for entry in parsed.entries]
    channel = ParsedChannel(
        title=parsed.feed.get("title"),
        link=parsed.feed.get("link"),
        items=items,
    )
    logger.info(
        "Parsed %d items from %s feed '%s'",
        len(items),
        parsed.version,
        channel.title,
    )
    return channel


def _to_item(entry: Any) -> FeedItem:
    return FeedItem(
        title=entry.get("title"),
        description=_own_description(entry),
        link=_own_link(entry),
    )


def _own_description(entry: Any) -> Optional[str]:
    """Return the item's description, ignoring summaries copied from content."""
    summary = entry.get("summary")
    content = entry.get("content")
    if summary is not None and content:
        if summary == content[0].get("value"):
            return None
    return summary


def _own_link(entry: Any) -> Optional[str]:
    """Return the item's link, ignoring links feedparser copied from a permalink guid."""
    link = entry.get("link")
    if link is not None and entry.get("guidislink") and link == entry.get("id"):
        return None
    return link


def project_item(item: FeedItem, position: int = 0) -> DisplayRecord:
    """Map a feed item to a display record, filling absent fields."""
    if item.title is None:
        raise MissingTitleError(position)

    description = item.description
    if description is None:
        description = NO_DESCRIPTION
    link = item.link
    if link is None:
        link = NO_LINK

    return DisplayRecord(title=item.title, description=description, link=link)


def project_channel(channel: ParsedChannel) -> List[DisplayRecord]:
    """Return one display record per channel item, in feed order."""
    return [
        project_item(item, position) for position, item in enumerate(channel.items)
    ]
