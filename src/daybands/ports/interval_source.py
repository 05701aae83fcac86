"""Interval source interface."""

from typing import Protocol

from daybands.core.intervals import TimeInterval


class IntervalSource(Protocol):
    """Interface for loading calendar intervals from any backend."""

    def fetch_intervals(self) -> list[TimeInterval]:
        """Fetch every interval the source knows about."""
        ...
