"""Structured JSON logging with service context."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredLogFormatter(logging.Formatter):
    """
    JSON log formatter.

    Outputs logs in JSON format with:
    - Standard log fields (timestamp, level, message, logger)
    - Service context (service, environment) when attached by a filter
    - Source location
    - Exception information
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        service = getattr(record, "service", None)
        if service:
            log_entry["service"] = service
            log_entry["environment"] = getattr(record, "environment", "")

        log_entry["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class ServiceContextFilter(logging.Filter):
    """Logging filter that stamps service name and environment on every record."""

    def __init__(self, service: str, environment: str) -> None:
        super().__init__()
        self.service = service
        self.environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context fields to the log record."""
        record.service = self.service
        record.environment = self.environment
        return True


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
    service: str | None = None,
    environment: str = "development",
    module_levels: dict[str, str] | None = None,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Default log level.
        json_format: If True, use JSON format. Otherwise, use standard format.
        service: Service name stamped on every record (omitted if None).
        environment: Deployment environment stamped alongside the service.
        module_levels: Per-module log levels (e.g., {"shop_catalog.engine": "DEBUG"}).
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    if json_format:
        handler.setFormatter(StructuredLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))

    if service:
        handler.addFilter(ServiceContextFilter(service, environment))

    root_logger.addHandler(handler)

    if module_levels:
        for module, mod_level in module_levels.items():
            logging.getLogger(module).setLevel(getattr(logging, mod_level.upper()))

    # Reduce noise from common libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.info(
        f"Logging configured: level={level}, json={json_format}, "
        f"module_levels={module_levels or {}}"
    )
