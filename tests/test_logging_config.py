import logging

from hotelcast.logging_config import (
    LOGGER_NAME,
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
)


def test_package_logger_is_silent_by_default():
    import hotelcast  # noqa: F401
    logger = logging.getLogger(LOGGER_NAME)
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_configure_from_env_without_level_does_nothing(monkeypatch):
    monkeypatch.delenv("HOTELCAST_LOGGING", raising=False)
    assert configure_from_env() is False


def test_configure_from_env_attaches_console_and_file(monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "hotel.log"
    monkeypatch.setenv("HOTELCAST_LOGGING", "debug")
    monkeypatch.setenv("HOTELCAST_LOG_FILE", str(log_file))
    try:
        assert configure_from_env() is True
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.level == logging.DEBUG
        logging.getLogger("hotelcast.compute").debug("ledger assembled")
        for h in logger.handlers:
            h.flush()
        assert log_file.exists()
        assert "ledger assembled" in log_file.read_text()
    finally:
        disable_logging()
        logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)


def test_disable_logging_keeps_null_handler(tmp_path):
    enable_console_logging("INFO")
    enable_file_logging(tmp_path / "x.log")
    disable_logging()
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)
    handlers = logging.getLogger(LOGGER_NAME).handlers
    assert handlers
    assert all(isinstance(h, logging.NullHandler) for h in handlers)
