"""Diagnostic trace interface."""

from datetime import date
from typing import Any, Protocol


class TraceSink(Protocol):
    """Interface for receiving structured projection decisions."""

    def record(self, event: str, column_date: date, interval_id: str, **details: Any) -> None:
        """Record one decision taken for one interval on one column."""
        ...
