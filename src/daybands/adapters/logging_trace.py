"""Logging trace adapter - writes projection decisions to the log."""

import logging
from datetime import date
from typing import Any


class LoggingTraceSink:
    """
    Trace sink backed by the standard logging module.

    Implements TraceSink protocol. One log record per decision, e.g.
    ``2025-01-15 lunch painted top=504.0 bottom=546.0 height=42.0``.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger("daybands.trace")
        self.level = level

    def record(self, event: str, column_date: date, interval_id: str, **details: Any) -> None:
        if not self.logger.isEnabledFor(self.level):
            return
        fields = " ".join(f"{key}={value}" for key, value in details.items())
        message = f"{column_date.isoformat()} {interval_id} {event}"
        if fields:
            message = f"{message} {fields}"
        self.logger.log(self.level, message)
