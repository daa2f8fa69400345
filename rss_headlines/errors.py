"""Error types raised along the fetch-parse-project pipeline."""

from __future__ import annotations


class NewsError(Exception):
    """Base class for failures that end a run."""

    stage = "run"

    def describe(self) -> str:
        return f"{self.stage} failed: {self}"


class RegistryLookupError(NewsError):
    stage = "registry"

    def __init__(self, name: str):
        super().__init__(f"no news source named {name!r}")
        self.name = name


class NetworkError(NewsError):
    stage = "fetch"

    def __init__(self, url: str, reason: object):
        super().__init__(f"could not download {url}: {reason}")
        self.url = url


class ParseError(NewsError):
    stage = "parse"


class MissingTitleError(NewsError):
    stage = "project"

    def __init__(self, position: int):
        super().__init__(f"feed item #{position + 1} has no title")
        self.position = position
