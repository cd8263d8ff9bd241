"""
Logging configuration for the MRZ verifier.

Every record that reaches the console handler passes through
``PersonalNumberFilter``: MRZ lines carry the holder's personal or national
ID number at positions 28-41, and those characters are masked before the
record is formatted.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime

from opentelemetry import trace

from mrz_verifier.config import settings

TEXT_LOG_FORMAT = (
    "%(asctime)s - %(levelname)s - [%(service_name)s] - [%(name)s] - "
    "[%(module)s.%(funcName)s:%(lineno)d] - %(message)s"
)
LOG_OFF_LEVEL = "OFF"

PERSONAL_NUMBER_OFFSET = 28
PERSONAL_NUMBER_LENGTH = 14
MASK_CHAR = "*"

# A run of MRZ characters long enough to reach the personal number field
_MRZ_RUN = re.compile(
    r"(?<![A-Z0-9<])([A-Z0-9<]{%d})([A-Z0-9<]{1,%d})"
    % (PERSONAL_NUMBER_OFFSET, PERSONAL_NUMBER_LENGTH)
)


def mask_personal_numbers(message: str) -> str:
    """
    Mask the personal number positions of every MRZ line found in ``message``.

    Fillers are kept so the masked line still lines up with the field table.
    """

    def _mask(match: re.Match[str]) -> str:
        return match.group(1) + re.sub(r"[A-Z0-9]", MASK_CHAR, match.group(2))

    return _MRZ_RUN.sub(_mask, message)


class PersonalNumberFilter(logging.Filter):
    """Filter that rewrites log messages so personal numbers never reach the output."""

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Leave badly formatted records to the handler's own error reporting
            return True
        masked = mask_personal_numbers(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


class ServiceNameFilter(logging.Filter):
    """Filter to inject service name into log records."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = self.service_name
        return True


class TraceContextFilter(logging.Filter):
    """Filter to inject trace context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            record.trace_id = format(span_context.trace_id, "032x")
            record.span_id = format(span_context.span_id, "016x")
        else:
            record.trace_id = None
            record.span_id = None
        return True


class MRZJSONFormatter(logging.Formatter):
    """One JSON object per record; carries the MRZ error code when the record has one."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "service": getattr(record, "service_name", "unknown"),
            "logger": record.name,
            "message": record.getMessage(),
        }

        mrz_error = getattr(record, "mrz_error", None)
        if mrz_error:
            log_entry["mrz_error"] = mrz_error
        if getattr(record, "trace_id", None):
            log_entry["trace_id"] = record.trace_id
            log_entry["span_id"] = record.span_id
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def setup_logging(
    service_name: str = "mrz-verifier",
    log_level: str | None = None,
    log_format: str | None = None,
) -> logging.Handler | None:
    """
    Configure root logging for the service.

    Args:
        service_name: Name of the service for log identification
        log_level: Level name, or "OFF"; defaults to ``settings.LOG_LEVEL``
        log_format: "json", "text" or a logging format string; defaults to ``settings.LOG_FORMAT``

    Returns:
        The installed console handler, or None when logging is turned off
    """
    level_name = (log_level or settings.LOG_LEVEL).upper()
    format_name = log_format or settings.LOG_FORMAT

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if level_name == LOG_OFF_LEVEL:
        root_logger.setLevel(logging.CRITICAL + 1)
        return None

    level = logging.getLevelName(level_name)
    root_logger.setLevel(level if isinstance(level, int) else logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    if format_name.lower() == "json":
        console_handler.setFormatter(MRZJSONFormatter())
    elif format_name.lower() == "text":
        console_handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(format_name))

    console_handler.addFilter(PersonalNumberFilter())
    console_handler.addFilter(ServiceNameFilter(service_name))
    console_handler.addFilter(TraceContextFilter())
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured. Service: %s, Level: %s", service_name, level_name
    )
    return console_handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance for the module."""
    return logging.getLogger(name or __name__)
