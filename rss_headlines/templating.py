"""Jinja2 environment for rss_headlines templates."""

from __future__ import annotations

from importlib import resources

import click
from jinja2 import Environment, FileSystemLoader, select_autoescape

_ENV: Environment | None = None


def _headline(value: str) -> str:
    return click.style(value, fg="red", bold=True)


def _blurb(value: str) -> str:
    return click.style(value, fg="yellow", italic=True)


def _hyperlink(value: str) -> str:
    return click.style(value, fg="blue", italic=True)


def get_environment() -> Environment:
    """Return a cached Jinja environment configured for package templates."""
    global _ENV
    if _ENV is None:
        template_dir = resources.files(__package__) / "templates"
        loader = FileSystemLoader(str(template_dir))
        _ENV = Environment(
            loader=loader,
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        _ENV.filters["headline"] = _headline
        _ENV.filters["blurb"] = _blurb
        _ENV.filters["hyperlink"] = _hyperlink
    return _ENV
