import pytest

from config import DEFAULT_LOG_LEVEL, DEFAULT_PORT, LOG_LEVELS, _read_log_level, _read_port


@pytest.mark.parametrize("raw, expected", [
    (None, DEFAULT_PORT),
    ("", DEFAULT_PORT),
    ("3000", 3000),
    ("not-a-port", DEFAULT_PORT),
    ("70000", DEFAULT_PORT),
])
def test_read_port(raw, expected):
    assert _read_port(raw) == expected


def test_default_port_is_8080():
    assert DEFAULT_PORT == 8080


@pytest.mark.parametrize("raw, expected", [
    (None, "INFO"),
    ("", "INFO"),
    ("debug", "DEBUG"),
    ("WARN", "WARNING"),
    ("warn", "WARNING"),
    (" error ", "ERROR"),
    ("trace", "TRACE"),
    ("VERBOSE", DEFAULT_LOG_LEVEL),
])
def test_read_log_level(raw, expected):
    assert _read_log_level(raw) == expected


def test_invalid_log_level_warns(caplog):
    with caplog.at_level("WARNING", logger="config"):
        assert _read_log_level("VERBOSE") == "INFO"
    assert "Invalid LOG_LEVEL value" in caplog.text


def test_log_levels_are_accepted_by_uvicorn():
    from uvicorn.config import LOG_LEVELS as UVICORN_LOG_LEVELS

    for level in LOG_LEVELS:
        assert level.lower() in UVICORN_LOG_LEVELS


def test_run_passes_validated_level_to_uvicorn(monkeypatch):
    from unittest.mock import patch

    import config
    import main

    monkeypatch.setattr(config, "LOG_LEVEL", _read_log_level("WARN"))
    with patch("main.uvicorn.run") as uvicorn_run:
        main.run()
    assert uvicorn_run.call_args.kwargs["log_level"] == "warning"
    assert uvicorn_run.call_args.kwargs["port"] == config.PORT


def test_invalid_port_warns(caplog):
    with caplog.at_level("WARNING", logger="config"):
        _read_port("not-a-port")
        _read_port("70000")
    assert "Invalid PORT value: 'not-a-port'. Using default: 8080" in caplog.text
    assert "PORT 70000 out of range. Using default: 8080" in caplog.text
