import logging
import sys
from pathlib import Path

import structlog

from src.config.config import config

LOG_DIR = Path("logs")


class GatewayFormatter(logging.Formatter):
    """Formats records as: [yyyy-mm-dd hh:mm:ss] [LEVEL] [module]: message"""

    def format(self, record):
        module = record.name.rsplit('.', 1)[-1]
        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')
        line = f"[{timestamp}] [{record.levelname}] [{module}]: {record.getMessage()}"

        if record.exc_info:
            line += '\n' + self.formatException(record.exc_info)

        return line


def get_log_file_path() -> Path:
    """Per-environment log file under logs/, creating the directory on demand."""
    LOG_DIR.mkdir(exist_ok=True)
    return LOG_DIR / f"realtime_gateway_{config.environment}.log"


def _configure_structlog():
    # structlog events become stdlib records so they share the root handlers
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging() -> Path:
    """
    Route the gateway's logs to stdout and to the environment's log file.

    The stdlib root logger owns the handlers; structlog loggers used across
    the gateway render their key/value events into the record message.

    Returns:
        Path of the log file being written
    """
    level = getattr(logging, config.log_level)
    log_file_path = get_log_file_path()
    formatter = GatewayFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    for handler in (
        logging.FileHandler(log_file_path, encoding='utf-8'),
        logging.StreamHandler(sys.stdout),
    ):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _configure_structlog()

    structlog.get_logger(__name__).info("Logging configured", log_file=str(log_file_path))
    return log_file_path
