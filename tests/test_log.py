import logging

import pytest

from pywide.base import DivideByZeroError
from pywide.log import LOGGER_NAME, LogConfig, LogLevel, get_logger, setup_logging
from pywide.widths import Int64


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


class TestLogging:

    def test_get_logger_namespaces(self):
        assert get_logger().name == LOGGER_NAME
        assert get_logger("pywide.codec").name == "pywide.codec"
        assert get_logger("app").name == "pywide.app"

    def test_setup_writes_file(self, tmp_path, restore_logger):
        log_file = tmp_path / "wide.log"
        config = LogConfig(
            log_file=str(log_file),
            log_level=LogLevel.DEBUG,
            enable_console_output=False,
            enable_file_output=True,
            clear_log_file=True,
        )
        logger = setup_logging(config)
        get_logger("pywide.test").debug("codec chunk written")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "pywide logging to" in text
        assert "codec chunk written" in text

    def test_setup_replaces_handlers(self, restore_logger):
        config = LogConfig(enable_console_output=True, enable_file_output=False)
        setup_logging(config)
        setup_logging(config)
        assert len(restore_logger.handlers) == 1

    def test_errors_are_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        with pytest.raises(DivideByZeroError):
            Int64.ONE // 0
        assert "division of" in caplog.text

    def test_levels_map_to_logging(self, restore_logger):
        assert LogLevel.WARNING == logging.WARNING
        config = LogConfig(log_level=LogLevel.ERROR, enable_console_output=False)
        setup_logging(config)
        assert restore_logger.level == logging.ERROR
        assert restore_logger.handlers == []
