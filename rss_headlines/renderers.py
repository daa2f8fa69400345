"""Terminal rendering of display records."""

from __future__ import annotations

from typing import IO, Optional

import click

from .models import DisplayRecord
from .templating import get_environment


def format_record(record: DisplayRecord) -> str:
    """Render the styled title, description and link lines of ``record``."""
    template = get_environment().get_template("news_item.txt.j2")
    return template.render(record=record)


def render_record(record: DisplayRecord, file: Optional[IO[str]] = None) -> None:
    """Print ``record`` followed by a blank separator line.

    Styling is dropped automatically when the output is not a terminal.
    """
    click.echo(format_record(record), file=file)
    click.echo(file=file)
