"""Configuration management for daybands."""

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from .core.intervals import VisibleWindow
from .core.projector import DEFAULT_PAUSE_COLOR
from .core.week import ALL_WEEK_DAYS

logger = logging.getLogger(__name__)

DAYBANDS_HOME = Path(os.environ.get("DAYBANDS_HOME", Path.home() / ".daybands"))
CONFIG_FILE = DAYBANDS_HOME / "config" / "daybands.conf"

_WEEKDAY_NAMES = {
    "mon": 1,
    "tue": 2,
    "wed": 3,
    "thu": 4,
    "fri": 5,
    "sat": 6,
    "sun": 7,
}


class ConfigError(Exception):
    """Raised when configured values cannot produce a valid layout."""

    pass


@dataclass
class Config:
    """Layout and styling configuration."""

    start_hour: int = 0
    end_hour: int = 24
    height_per_minute: float = 0.7
    column_width: int = 120
    pause_color: str = DEFAULT_PAUSE_COLOR
    grid_color: str = "#CCCCCC"
    background: str = "white"
    week_days: list[int] = field(default_factory=lambda: list(ALL_WEEK_DAYS))
    show_half_hours: bool = False
    show_quarter_hours: bool = False

    @property
    def column_height(self) -> float:
        return (self.end_hour - self.start_hour) * 60 * self.height_per_minute

    def window(self, column_date: date) -> VisibleWindow:
        """Build the visible window for one column."""
        try:
            return VisibleWindow(
                column_date=column_date,
                pixels_per_minute=self.height_per_minute,
                pixel_width=self.column_width,
                pixel_height=self.column_height,
                start_hour=self.start_hour,
                end_hour=self.end_hour,
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e


def parse_week_days(value: str) -> list[int]:
    """Parse "mon,tue,wed" or "1,2,3" into ISO weekday numbers."""
    days = []
    for part in value.split(","):
        part = part.strip().lower()
        if not part:
            continue
        if part.isdigit():
            day = int(part)
        elif part[:3] in _WEEKDAY_NAMES:
            day = _WEEKDAY_NAMES[part[:3]]
        else:
            raise ValueError(f"Unknown weekday: {part}")
        if not 1 <= day <= 7:
            raise ValueError(f"Weekday out of range: {day}")
        days.append(day)
    return days


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off", ""):
        return False
    raise ValueError(f"Not a boolean: {value}")


def _strip_value(value: str) -> str:
    """Drop quotes, or an inline comment on an unquoted value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from daybands.conf; unknown or bad values keep their defaults."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        try:
            match key:
                case "start_hour":
                    config.start_hour = int(value)
                case "end_hour":
                    config.end_hour = int(value)
                case "height_per_minute":
                    config.height_per_minute = float(value)
                case "column_width":
                    config.column_width = int(value)
                case "pause_color":
                    config.pause_color = value
                case "grid_color":
                    config.grid_color = value
                case "background":
                    config.background = value
                case "week_days":
                    config.week_days = parse_week_days(value)
                case "show_half_hours":
                    config.show_half_hours = _parse_bool(value)
                case "show_quarter_hours":
                    config.show_quarter_hours = _parse_bool(value)
                case _:
                    logger.debug(f"Ignoring unknown config key: {key}")
        except ValueError as e:
            logger.warning(f"Invalid value for {key.upper()} in {path}: {e}")

    return config
