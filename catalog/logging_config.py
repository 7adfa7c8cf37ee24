"""
Logging configuration module for the catalog library.

Provides centralized logging setup with consistent formatting. The stdlib
logger is used by the domain and repository layers; structlog is layered
on top of it for key-value events in the service layer.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

import structlog

from .config import settings


class StructuredFormatter(logging.Formatter):
    """
    Custom log formatter that outputs structured JSON logs.

    Provides machine-readable log output for log aggregation systems.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON with structured fields.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """
    Human-readable log formatter for development environments.

    Provides colored output while keeping the logger name and source
    location.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        message = " ".join(
            [
                f"{color}{record.levelname:8}{reset}",
                f"[{record.name}]",
                f"[{record.filename}:{record.lineno}]",
                record.getMessage(),
            ]
        )

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


def configure_structlog(use_json: bool = False) -> None:
    """
    Configure structlog to render through the stdlib logging handlers.

    Args:
        use_json: Render events as JSON instead of key=value pairs
    """
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.processors.KeyValueRenderer(key_order=["event"])
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(
    log_level: str = "INFO",
    service_name: str = "catalog",
    use_json: bool = False,
) -> logging.Logger:
    """
    Configure application logging with structured format.

    Supports both JSON structured logging for production and a
    human-readable format for development.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name: Name of the service for log identification
        use_json: Use JSON structured logging instead of human-readable format

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter: logging.Formatter
    if use_json:
        formatter = StructuredFormatter(datefmt="%Y-%m-%d %H:%M:%S")
    else:
        formatter = HumanReadableFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    configure_structlog(use_json=use_json)

    logger = logging.getLogger(service_name)
    logger.setLevel(numeric_level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name for the logger (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or "catalog")


def setup_logging_from_settings() -> logging.Logger:
    """
    Configure logging from the application settings.

    Returns:
        Configured logger instance
    """
    return setup_logging(
        log_level=settings.LOG_LEVEL,
        service_name=settings.APP_NAME,
        use_json=settings.LOG_JSON,
    )
