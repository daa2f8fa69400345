"""High-level orchestration for the rss_headlines application."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .config import DEFAULT_TIMEOUT
from .feeds import fetch_feed, parse_feed, project_channel
from .menu import Cancelled, MenuResult, present
from .models import DisplayRecord
from .registry import SourceRegistry
from .renderers import render_record

logger = logging.getLogger(__name__)


@dataclass
class RunConfig:
    """Runtime options for executing the application."""

    registry: SourceRegistry
    timeout: Optional[float] = DEFAULT_TIMEOUT
    source: Optional[str] = None


@dataclass
class RunResult:
    """Returned data after executing the app."""

    source: Optional[str]
    records: List[DisplayRecord] = field(default_factory=list)
    cancelled: bool = False


def _choose_source(
    config: RunConfig, present: Callable[[Sequence[str]], MenuResult]
) -> Optional[str]:
    if config.source is not None:
        logger.info("Using news source '%s' from the command line", config.source)
        return config.source

    outcome = present(config.registry.names())
    if isinstance(outcome, Cancelled):
        return None
    return outcome.name


def execute(
    config: RunConfig,
    present: Callable[[Sequence[str]], MenuResult] = present,
    render: Callable[[DisplayRecord], None] = render_record,
) -> RunResult:
    """Select a source, then fetch, parse, project and print its entries.

    ``present`` shows the source menu and ``render`` prints one record.
    Any pipeline failure propagates as a ``NewsError`` before a single
    entry is printed.
    """
    name = _choose_source(config, present)
    if name is None:
        return RunResult(source=None, cancelled=True)

    url = config.registry.resolve(name)
    content = fetch_feed(url, timeout=config.timeout)
    channel = parse_feed(content)
    records = project_channel(channel)
    logger.info("Rendering %d entries from '%s'", len(records), name)

    for record in records:
        render(record)

    return RunResult(source=name, records=records)
