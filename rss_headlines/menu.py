"""Interactive single-choice menu for picking a news source."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

import click

logger = logging.getLogger(__name__)

PROMPT = "Select your news feed: "
NOTHING_SELECTED = "User did not select anything"

KEYS_UP = frozenset({"\x1b[A", "\x1bOA", "\xe0H", "\x00H", "k"})
KEYS_DOWN = frozenset({"\x1b[B", "\x1bOB", "\xe0P", "\x00P", "j"})
KEYS_CONFIRM = frozenset({"\r", "\n"})
KEYS_CANCEL = frozenset({"\x1b", "q", "Q"})


@dataclass(frozen=True)
class Selected:
    name: str


@dataclass(frozen=True)
class Cancelled:
    pass


MenuResult = Union[Selected, Cancelled]


def _read_key() -> str:
    return click.getchar(echo=False)


def _draw(options: Sequence[str], highlighted: int) -> None:
    click.clear()
    click.echo(PROMPT)
    for index, option in enumerate(options):
        if index == highlighted:
            click.echo(click.style(f"> {option}", fg="cyan", bold=True))
        else:
            click.echo(f"  {option}")


def _choose(options: Sequence[str], read_key: Callable[[], str]) -> Optional[int]:
    """Run the key loop; return the confirmed index or ``None`` on cancel."""
    highlighted = 0
    while True:
        _draw(options, highlighted)
        try:
            key = read_key()
        except (KeyboardInterrupt, EOFError):
            return None

        if key in KEYS_CONFIRM:
            return highlighted
        if key in KEYS_CANCEL:
            return None
        if key in KEYS_UP:
            highlighted = (highlighted - 1) % len(options)
        elif key in KEYS_DOWN:
            highlighted = (highlighted + 1) % len(options)
        else:
            logger.debug("Ignoring key %r", key)


def present(
    options: Sequence[str], read_key: Callable[[], str] = _read_key
) -> MenuResult:
    """Show ``options`` and block until the user picks one or cancels.

    The first option starts highlighted. The screen is cleared on every
    exit path before the outcome is echoed.
    """
    if not options:
        raise ValueError("The menu needs at least one option.")

    try:
        index = _choose(options, read_key)
    finally:
        click.clear()

    if index is None:
        logger.info("Menu cancelled")
        click.echo(NOTHING_SELECTED)
        return Cancelled()

    choice = options[index]
    logger.info("Selected news source '%s'", choice)
    click.echo(click.style(choice, fg="black", bg="white", bold=True))
    return Selected(choice)
