"""Fixed mapping from news source names to feed URLs."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping

from .config import parse_sources_config
from .errors import RegistryLookupError
from .models import SourceEntry

logger = logging.getLogger(__name__)

DEFAULT_SOURCES = (
    SourceEntry(name="TVR", url="http://stiri.tvr.ro/rss/stiri.xml"),
    SourceEntry(name="MediaFax", url="https://www.mediafax.ro/rss"),
)


class SourceRegistry:
    """Read-only registry of news sources.

    Names keep the order they were given in, which is also the order the
    menu offers them.
    """

    def __init__(self, sources: Iterable[SourceEntry]):
        urls = {}
        for source in sources:
            if source.name in urls:
                logger.warning(
                    "Ignoring duplicate source '%s' (%s)", source.name, source.url
                )
                continue
            urls[source.name] = source.url
        if not urls:
            raise ValueError("At least one news source must be configured.")
        self._urls: Mapping[str, str] = MappingProxyType(urls)

    def names(self) -> List[str]:
        return list(self._urls)

    def resolve(self, name: str) -> str:
        try:
            return self._urls[name]
        except KeyError:
            raise RegistryLookupError(name) from None

    def __len__(self) -> int:
        return len(self._urls)


def default_registry() -> SourceRegistry:
    return SourceRegistry(DEFAULT_SOURCES)


def load_registry(path: str) -> SourceRegistry:
    """Build a registry from an OPML source list."""
    return SourceRegistry(parse_sources_config(path))
