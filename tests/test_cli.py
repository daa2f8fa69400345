import logging
import textwrap

import pytest

from rss_headlines import cli
from rss_headlines.errors import NetworkError, ParseError
from rss_headlines.runner import RunResult


@pytest.fixture
def restore_logging():
    original_handlers = list(logging.getLogger().handlers)
    for handler in logging.getLogger().handlers[:]:
        logging.getLogger().removeHandler(handler)
    try:
        yield
    finally:
        for handler in logging.getLogger().handlers[:]:
            logging.getLogger().removeHandler(handler)
            handler.close()
        for handler in original_handlers:
            logging.getLogger().addHandler(handler)


@pytest.fixture
def quiet_logging(monkeypatch):
    captured = {}

    def fake_configure(level, log_file=None):
        captured["level"] = level
        captured["file"] = log_file

    monkeypatch.setattr(cli, "configure_logging", fake_configure)
    return captured


def test_configure_logging_defaults_to_console_only(restore_logging):
    cli.configure_logging("INFO")

    handlers = logging.getLogger().handlers
    assert any(isinstance(handler, logging.StreamHandler) for handler in handlers)
    assert not any(isinstance(handler, logging.FileHandler) for handler in handlers)


def test_configure_logging_with_log_file_creates_file_handler(restore_logging, tmp_path):
    log_path = tmp_path / "nested" / "custom.log"
    cli.configure_logging("DEBUG", str(log_path))

    assert log_path.exists()
    assert any(
        isinstance(handler, logging.FileHandler)
        for handler in logging.getLogger().handlers
    )


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        cli.configure_logging("LOUD")


def test_main_without_arguments_uses_default_registry(monkeypatch, quiet_logging):
    captured = {}

    def fake_execute(config):
        captured["config"] = config
        return RunResult(source="TVR")

    monkeypatch.setattr(cli, "execute", fake_execute)

    assert cli.main([]) == 0
    config = captured["config"]
    assert config.registry.names() == ["TVR", "MediaFax"]
    assert config.timeout == 10.0
    assert config.source is None
    assert quiet_logging == {"level": "WARNING", "file": None}


def test_main_returns_zero_on_cancel(monkeypatch, quiet_logging):
    monkeypatch.setattr(
        cli, "execute", lambda config: RunResult(source=None, cancelled=True)
    )

    assert cli.main([]) == 0


def test_main_reports_pipeline_errors(monkeypatch, quiet_logging, capsys):
    def fake_execute(config):
        raise NetworkError("http://stiri.tvr.ro/rss/stiri.xml", "timed out")

    monkeypatch.setattr(cli, "execute", fake_execute)

    assert cli.main(["--source", "TVR"]) == 1
    err = capsys.readouterr().err.strip()
    assert err == (
        "error: fetch failed: could not download "
        "http://stiri.tvr.ro/rss/stiri.xml: timed out"
    )


def test_main_reports_parse_errors(monkeypatch, quiet_logging, capsys):
    def fake_execute(config):
        raise ParseError("document is not a recognised RSS or Atom feed")

    monkeypatch.setattr(cli, "execute", fake_execute)

    assert cli.main([]) == 1
    assert capsys.readouterr().err.startswith("error: parse failed:")


def test_main_loads_config_and_sources(monkeypatch, quiet_logging, tmp_path):
    (tmp_path / "feeds.xml").write_text(
        '<opml version="2.0"><body>'
        '<outline type="rss" text="Digi24" xmlUrl="https://www.digi24.ro/rss" />'
        "</body></opml>",
        encoding="utf-8",
    )
    config_file = tmp_path / "config.xml"
    config_file.write_text(
        textwrap.dedent(
            """\
            <config>
              <sources>feeds.xml</sources>
              <timeout>none</timeout>
              <logging><level>INFO</level><file>app.log</file></logging>
            </config>
            """
        ),
        encoding="utf-8",
    )
    captured = {}

    def fake_execute(config):
        captured["config"] = config
        return RunResult(source="Digi24")

    monkeypatch.setattr(cli, "execute", fake_execute)

    assert cli.main(["--config", str(config_file), "--log-level", "DEBUG"]) == 0
    assert captured["config"].registry.names() == ["Digi24"]
    assert captured["config"].timeout is None
    assert quiet_logging["level"] == "DEBUG"
    assert quiet_logging["file"] == str((tmp_path / "app.log").resolve())


def test_main_missing_config_file(monkeypatch, quiet_logging, tmp_path):
    monkeypatch.setattr(cli, "execute", lambda config: RunResult(source="TVR"))

    assert cli.main(["--config", str(tmp_path / "absent.xml")]) == 1


def test_main_invalid_config_is_usage_error(monkeypatch, quiet_logging, tmp_path):
    config_file = tmp_path / "config.xml"
    config_file.write_text("<config><timeout>-1</timeout></config>", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--config", str(config_file)])

    assert excinfo.value.code == 2


def test_configure_logging_quiets_urllib3_above_debug(restore_logging):
    urllib3_logger = logging.getLogger("urllib3")
    original_level = urllib3_logger.level
    try:
        cli.configure_logging("INFO")

        assert logging.getLogger().level == logging.INFO
        assert urllib3_logger.level == logging.WARNING
    finally:
        urllib3_logger.setLevel(original_level)
