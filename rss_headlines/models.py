"""Shared data models for rss_headlines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

NO_DESCRIPTION = "No description"
NO_LINK = "No link for this news"


@dataclass(frozen=True)
class SourceEntry:
    """A named news source and the URL of its feed."""

    name: str
    url: str


@dataclass
class FeedItem:
    """Single item as read from a feed; ``None`` marks an absent field."""

    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None


@dataclass
class ParsedChannel:
    """Top-level feed container holding items in document order."""

    title: Optional[str] = None
    link: Optional[str] = None
    items: List[FeedItem] = field(default_factory=list)


@dataclass(frozen=True)
class DisplayRecord:
    """Simplified entry printed to the terminal."""

    title: str
    description: str
    link: str
