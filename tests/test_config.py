import structlog

from input_validation import configure_logging
from input_validation.config import get_settings


def test_settings_defaults(monkeypatch):
    for name in ("DEBUG", "LOG_LEVEL", "TREAT_ABSENT_INPUT_AS_ERROR"):
        monkeypatch.delenv(f"INPUT_VALIDATION_{name}", raising=False)
    settings = get_settings()
    assert settings.DEBUG is False
    assert settings.LOG_LEVEL == "info"
    assert settings.TREAT_ABSENT_INPUT_AS_ERROR is True


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("INPUT_VALIDATION_LOG_LEVEL", "debug")
    monkeypatch.setenv("INPUT_VALIDATION_DEBUG", "true")
    settings = get_settings()
    assert settings.LOG_LEVEL == "debug"
    assert settings.DEBUG is True


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_configure_logging_filters_below_level(capsys):
    configure_logging(level="warning", debug=False)
    logger = structlog.get_logger()
    logger.info("hidden_event")
    logger.warning("shown_event", field="Password")

    output = capsys.readouterr().out
    assert "hidden_event" not in output
    assert "shown_event" in output
    assert '"field": "Password"' in output


def test_configure_logging_unknown_level_falls_back_to_info(capsys):
    configure_logging(level="verbose", debug=False)
    logger = structlog.get_logger()
    logger.debug("debug_event")
    logger.info("info_event")

    output = capsys.readouterr().out
    assert "debug_event" not in output
    assert "info_event" in output
