"""JSON file adapter - loads intervals from an exported event list."""

import json
import logging
from datetime import date, datetime
from pathlib import Path

from daybands.core.intervals import TimeInterval

logger = logging.getLogger(__name__)


class IntervalSourceError(Exception):
    """Raised when an interval file cannot be read."""

    pass


class JsonIntervalSource:
    """
    JSON file interval source.

    Implements IntervalSource protocol. The file holds a JSON array of
    objects:

        {"id": "lunch", "title": "Lunch", "date": "2025-01-15",
         "start": "2025-01-15T12:00:00", "end": "2025-01-15T13:00:00",
         "pause": true, "full_width": false, "color": "#88AACC"}

    `start`/`end` may be null. `date` defaults to the start's date.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def fetch_intervals(self) -> list[TimeInterval]:
        """Read and parse every interval in the file."""
        try:
            data = json.loads(self.path.read_text())
        except FileNotFoundError:
            raise IntervalSourceError(f"Interval file not found: {self.path}")
        except (OSError, json.JSONDecodeError) as e:
            raise IntervalSourceError(f"Could not read {self.path}: {e}")

        if not isinstance(data, list):
            raise IntervalSourceError(f"{self.path} must contain a JSON array of intervals")

        intervals = []
        for index, item in enumerate(data):
            try:
                intervals.append(self._parse_item(item, index))
            except (ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed interval #{index} in {self.path}: {e}")
                continue

        return intervals

    def _parse_item(self, item: dict, index: int) -> TimeInterval:
        """Parse one JSON object into a TimeInterval."""
        start = _parse_datetime(item.get("start"))
        end = _parse_datetime(item.get("end"))

        if item.get("date"):
            anchor = date.fromisoformat(item["date"])
        elif start is not None:
            anchor = start.date()
        else:
            raise ValueError("needs a 'date' or a 'start'")

        return TimeInterval(
            id=str(item.get("id", index)),
            title=item.get("title", ""),
            date=anchor,
            start=start,
            end=end,
            is_pause=bool(item.get("pause", False)),
            is_full_width=bool(item.get("full_width", False)),
            color=item.get("color"),
        )


def _parse_datetime(value: str | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromisoformat(value)
