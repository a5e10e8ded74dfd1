"""Tests for structured logging utilities."""

import json
import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging's global changes after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


def _renderer_names(handler):
    return [type(p).__name__ for p in handler.formatter.processors]


def test_setup_logging_console_only_by_default():
    from dvw_reader.utils.config import Settings
    from dvw_reader.utils.logging import setup_logging

    setup_logging(Settings(log_format="console"))

    root = logging.getLogger()
    assert structlog.is_configured()
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0], logging.FileHandler)
    assert "ConsoleRenderer" in _renderer_names(root.handlers[0])


def test_setup_logging_json_console():
    from dvw_reader.utils.config import Settings
    from dvw_reader.utils.logging import setup_logging

    setup_logging(Settings(log_format="json"))

    (handler,) = logging.getLogger().handlers
    assert "JSONRenderer" in _renderer_names(handler)


def test_setup_logging_writes_json_lines_file(tmp_path):
    from dvw_reader.utils.config import Settings
    from dvw_reader.utils.logging import setup_logging

    log_file = tmp_path / "decoder.log"
    setup_logging(Settings(log_file=str(log_file), log_level="debug"))

    structlog.get_logger("dvw_reader.test").info("Decoded scout file", actions=6)
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["event"] == "Decoded scout file"
    assert record["actions"] == 6
    assert record["level"] == "info"


def test_setup_logging_replaces_previous_handlers(tmp_path):
    from dvw_reader.utils.config import Settings
    from dvw_reader.utils.logging import setup_logging

    setup_logging(Settings(log_file=str(tmp_path / "first.log")))
    setup_logging(Settings())

    assert len(logging.getLogger().handlers) == 1


def test_setup_logging_unopenable_file(tmp_path):
    from dvw_reader.utils.config import Settings
    from dvw_reader.utils.logging import setup_logging

    blocker = tmp_path / "not_a_dir"
    blocker.write_text("")

    with pytest.raises(OSError):
        setup_logging(Settings(log_file=str(blocker / "decoder.log")))


def test_setup_logging_uses_cached_settings(tmp_path, monkeypatch):
    from dvw_reader.utils.config import get_settings
    from dvw_reader.utils.logging import setup_logging

    monkeypatch.setenv("DVW_LOG_FILE", str(tmp_path / "env.log"))
    get_settings.cache_clear()
    try:
        setup_logging()
    finally:
        get_settings.cache_clear()

    assert (tmp_path / "env.log").exists()


def test_log_context_bind_and_clear():
    from dvw_reader.utils.logging import clear_log_context, log_context

    log_context(source="match.dvw", section="[3SET]")
    assert structlog.contextvars.get_contextvars() == {
        "source": "match.dvw",
        "section": "[3SET]",
    }

    clear_log_context("section")
    assert structlog.contextvars.get_contextvars() == {"source": "match.dvw"}

    clear_log_context()
    assert structlog.contextvars.get_contextvars() == {}


def test_read_from_file_clears_source_context(sample_path, settings):
    from dvw_reader import read_from_file

    read_from_file(sample_path, settings)
    assert "source" not in structlog.contextvars.get_contextvars()
