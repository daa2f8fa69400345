import textwrap

import pytest

SAMPLE_RSS = textwrap.dedent(
    """\
    <?xml version="1.0" encoding="UTF-8"?>
    <rss version="2.0">
      <channel>
        <title>Stiri</title>
        <link>http://example.com/</link>
        <description>Latest news</description>
        <item>
          <title>First</title>
          <description>One</description>
          <link>http://example.com/1</link>
        </item>
        <item>
          <title>Second</title>
          <link>http://example.com/2</link>
        </item>
        <item>
          <title>Third</title>
          <description>Three</description>
        </item>
      </channel>
    </rss>
    """
).encode("utf-8")


@pytest.fixture
def sample_rss():
    return SAMPLE_RSS


@pytest.fixture
def screen_clears(monkeypatch):
    """Replace click.clear with a counter so tests never touch the terminal."""
    import click

    calls = []
    monkeypatch.setattr(click, "clear", lambda: calls.append(True))
    return calls
