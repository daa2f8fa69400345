"""Command-line interface for the rss_headlines application."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import click

from .config import AppConfig, parse_app_config
from .errors import NewsError
from .registry import default_registry, load_registry
from .runner import RunConfig, execute

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Pick a news source and print the latest entries of its RSS feed."
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a configuration XML file. Built-in defaults apply without it.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING). Overrides config.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Optional path to a log file. Overrides config.",
    )
    parser.add_argument(
        "--source",
        metavar="NAME",
        default=None,
        help="Skip the menu and read the named news source directly.",
    )
    return parser


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level_name: str, log_file: Optional[str] = None) -> None:
    """Send log records to stderr and, optionally, to ``log_file``.

    Replaces any handlers installed by a previous call. Connection-pool
    chatter from urllib3 stays at WARNING unless DEBUG is requested.
    """
    log_level = logging.getLevelName(level_name.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unsupported log level: {level_name}")

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    if log_level > logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)

    logger.debug(
        "Logging at %s to %s",
        level_name.upper(),
        log_file or "stderr only",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_config = parse_app_config(args.config) if args.config else AppConfig()

        log_level = args.log_level or app_config.logging.level
        log_file = args.log_file or app_config.logging.file
        configure_logging(log_level, log_file)

        if app_config.sources_file:
            registry = load_registry(app_config.sources_file)
        else:
            registry = default_registry()

        config = RunConfig(
            registry=registry,
            timeout=app_config.timeout,
            source=args.source,
        )
        logger.debug(
            "Active configuration: %d sources %s, timeout=%s",
            len(registry),
            registry.names(),
            config.timeout,
        )

        result = execute(config)
    except ValueError as exc:
        parser.error(str(exc))
    except NewsError as exc:
        logger.debug("Run aborted", exc_info=True)
        click.echo(f"error: {exc.describe()}", err=True)
        return 1
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error during execution.")
        return 1

    if result.cancelled:
        logger.info("Nothing selected; exiting")
    return 0
