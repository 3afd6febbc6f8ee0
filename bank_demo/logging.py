"""Structured logging configuration for bank-demo.

Account and bank events attach their fields (account number, amount,
balance) through ``extra=log_fields(...)``. Both formatters render them:
the JSON formatter merges them into the document, the standard formatter
appends them as ``key=value`` pairs.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_fields(**fields: Any) -> dict[str, dict[str, Any]]:
    """Build the ``extra`` mapping for a log call.

    Usage::

        logger.info("Deposit", extra=log_fields(account_number=1, amount=amount))
    """
    return {"fields": fields}


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the fields attached to ``record`` by ``log_fields``, if any."""
    return dict(getattr(record, "fields", None) or {})


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
) -> None:
    """Configure logging for bank-demo.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        Format type: "standard" or "json".
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter: logging.Formatter = (
        JsonFormatter() if format_type == "json" else FieldsFormatter()
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stderr keeps log lines out of the console sink's stdout output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("bank_demo").setLevel(log_level)

    # Faker logs every locale/provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class FieldsFormatter(logging.Formatter):
    """Standard line format with attached fields appended as ``key=value``."""

    def __init__(self) -> None:
        super().__init__(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = record_fields(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{line} | {pairs}"


class JsonFormatter(logging.Formatter):
    """One JSON document per record, with attached fields at top level."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Decimal amounts are emitted as strings to keep their exact value
        for key, value in record_fields(record).items():
            data[key] = value if isinstance(value, (int, str)) else str(value)

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return json.dumps(data, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (usually ``__name__``)."""
    return logging.getLogger(name)
