import logging
from enum import IntEnum
from typing import Optional

from pydantic import BaseModel

LOGGER_NAME = "pywide"

class LogLevel(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

class LogConfig(BaseModel):
    """
    Where the `pywide` logger writes. The library itself only emits DEBUG
    records when it raises; applications opt in through `setup_logging`.
    """
    log_level: LogLevel = LogLevel.INFO
    format: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    date_format: str = '%H:%M:%S'
    console_level: LogLevel = LogLevel.INFO
    enable_console_output: bool = True
    log_file: str = "pywide.log"
    file_level: LogLevel = LogLevel.DEBUG
    enable_file_output: bool = False
    clear_log_file: bool = False

def _attach(logger, handler, level, formatter):
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

def setup_logging(config: Optional[LogConfig] = None) -> logging.Logger:
    """Replace the handlers of the `pywide` logger according to `config`."""
    config = config or LogConfig()
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(config.log_level)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)
    targets = []
    if config.enable_console_output:
        _attach(logger, logging.StreamHandler(), config.console_level, formatter)
        targets.append(f"console ({config.console_level.name})")
    if config.enable_file_output:
        mode = 'w' if config.clear_log_file else 'a'
        handler = logging.FileHandler(config.log_file, mode=mode, encoding='utf-8')
        _attach(logger, handler, config.file_level, formatter)
        targets.append(f"{config.log_file} ({config.file_level.name})")
    logger.info(f"pywide logging to {', '.join(targets) or 'nowhere'}")
    return logger

def get_logger(name: str = None) -> logging.Logger:
    if name is None or name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name or LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
