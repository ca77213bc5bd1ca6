"""Structured logging configuration with separate access and error log handlers.

This module configures Python logging with:
- JSON structured logging for production
- Separate handlers for access logs (uvicorn) and application logs
- Log rotation support
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

from .config import LoggingConfig

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds additional context fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to the log record."""
        super().add_fields(log_record, record, message_dict)

        log_record["logger"] = record.name
        log_record["level"] = record.levelname
        log_record["timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # Extra fields passed through log_with_context
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_record[key] = value


def _build_handler(
    log_file: str | None,
    stream: Any,
    config: LoggingConfig,
) -> logging.Handler:
    """Create a rotating file handler when a path is configured, else a stream handler."""
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=config.log_rotation_size,
            backupCount=config.log_rotation_count,
            encoding="utf-8",
        )
    return logging.StreamHandler(stream)


def setup_logging(config: LoggingConfig) -> None:
    """Configure logging with separate access and application handlers.

    Args:
        config: Logging configuration settings
    """
    if config.json_logs:
        formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)
    root_logger.handlers.clear()

    # Application logs
    error_handler = _build_handler(config.error_log_file, sys.stderr, config)
    error_handler.setLevel(config.log_level)
    error_handler.setFormatter(formatter)
    root_logger.addHandler(error_handler)

    # Uvicorn access logs
    access_logger = logging.getLogger("uvicorn.access")
    access_logger.setLevel(config.access_log_level)
    access_logger.propagate = False
    access_logger.handlers.clear()

    access_handler = _build_handler(config.access_log_file, sys.stdout, config)
    access_handler.setLevel(config.access_log_level)
    if config.json_logs:
        access_handler.setFormatter(formatter)
    else:
        access_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    access_logger.addHandler(access_handler)

    logging.getLogger("uvicorn").setLevel(config.log_level)
    logging.getLogger("uvicorn.error").setLevel(config.log_level)
    logging.getLogger("textconverter").setLevel(config.log_level)

    root_logger.info("Logging configured successfully")
    root_logger.info(f"Log level: {config.log_level}")
    root_logger.info(f"JSON logs: {config.json_logs}")
    root_logger.info(f"Error logs: {config.error_log_file or 'stderr'}")
    root_logger.info(f"Access logs: {config.access_log_file or 'stdout'}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """Log a message with additional context fields.

    With JSON logging, context fields become searchable attributes.

    Example:
        log_with_context(
            logger, logging.INFO,
            "Conversion completed",
            input_format="text",
            output_format="html",
            size=1024,
        )
    """
    logger.log(level, message, extra=context)
