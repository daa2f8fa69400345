"""Pick a news source, fetch its RSS feed and print the headlines."""

__version__ = "0.1.0"
