"""Interval, window and rectangle types - no I/O dependencies."""

from dataclasses import dataclass, replace
from datetime import date, datetime

MINUTES_PER_DAY = 24 * 60


@dataclass
class TimeInterval:
    """A calendar interval that may be painted as a band."""

    id: str
    date: date
    start: datetime | None
    end: datetime | None
    title: str = ""
    is_pause: bool = False
    is_full_width: bool = False
    color: str | None = None

    @property
    def is_complete(self) -> bool:
        """Both instants are present."""
        return self.start is not None and self.end is not None

    @property
    def is_multi_day(self) -> bool:
        if not self.is_complete:
            return False
        return self.end.date() != self.start.date()

    @property
    def end_date(self) -> date:
        """Calendar date of the end instant for multi-day intervals, else `date`."""
        if self.is_multi_day:
            return self.end.date()
        return self.date

    def paint_key(self) -> tuple:
        """Content used to decide whether a repaint is needed."""
        return (self.date, self.start, self.end)


@dataclass(frozen=True)
class VisibleWindow:
    """The part of a day rendered in one column, and its pixel scale."""

    column_date: date
    pixels_per_minute: float
    pixel_width: float
    pixel_height: float
    start_hour: int = 0
    end_hour: int = 24

    def __post_init__(self):
        if not 0 <= self.start_hour < self.end_hour <= 24:
            raise ValueError(
                f"Invalid hour window {self.start_hour}-{self.end_hour}: "
                "expected 0 <= start_hour < end_hour <= 24"
            )
        if self.pixels_per_minute <= 0:
            raise ValueError(f"pixels_per_minute must be positive, got {self.pixels_per_minute}")
        if self.pixel_width < 0 or self.pixel_height < 0:
            raise ValueError(
                f"Surface size must not be negative, got {self.pixel_width}x{self.pixel_height}"
            )

    @property
    def visible_minutes(self) -> int:
        return (self.end_hour - self.start_hour) * 60

    def for_date(self, column_date: date) -> "VisibleWindow":
        """Same window, another column."""
        return replace(self, column_date=column_date)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in surface pixels."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def translate(self, dx: float = 0.0, dy: float = 0.0) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


def minutes_of_day(dt: datetime) -> int:
    """Minutes since midnight, seconds ignored."""
    return dt.hour * 60 + dt.minute


def end_minutes_of_day(dt: datetime) -> int:
    """Minutes since midnight for an end bound; 23:59 reaches the end of the day."""
    if dt.hour == 23 and dt.minute == 59:
        return MINUTES_PER_DAY
    return minutes_of_day(dt)


def clamp_minutes(minutes: int) -> int:
    return max(0, min(MINUTES_PER_DAY, minutes))


def covers_date(interval: TimeInterval, column_date: date) -> bool:
    """Check if an interval paints anything on a calendar day."""
    if not interval.is_complete:
        return False
    if not interval.is_multi_day:
        return interval.date == column_date
    return interval.date <= column_date <= interval.end_date


def effective_minute_range(interval: TimeInterval, column_date: date) -> tuple[int, int] | None:
    """
    Minute range [start, end) that an interval covers on one calendar day.

    Pure function - no I/O.

    Single-day intervals only cover their own `date`. Multi-day intervals
    cover the tail of their start day, every day in between, and the head
    of their end day.

    Returns:
        (start, end) minutes since midnight, clamped to [0, 1440], or None
        if the interval is incomplete, does not touch `column_date`, or the
        range is empty.
    """
    if not covers_date(interval, column_date):
        return None

    if not interval.is_multi_day:
        start = minutes_of_day(interval.start)
        end = end_minutes_of_day(interval.end)
    elif column_date == interval.date:
        start = minutes_of_day(interval.start)
        end = MINUTES_PER_DAY
    elif column_date == interval.end_date:
        start = 0
        end = end_minutes_of_day(interval.end)
    else:
        start, end = 0, MINUTES_PER_DAY

    start = clamp_minutes(start)
    end = clamp_minutes(end)
    if end <= start:
        return None
    return start, end


def shift_into_window(start: int, end: int, window: VisibleWindow) -> tuple[int, int] | None:
    """Offsets of a minute range from the window's top edge, or None if it is not visible."""
    offset = window.start_hour * 60
    shifted_start = start - offset
    shifted_end = end - offset

    if shifted_end <= 0 or shifted_start >= window.visible_minutes:
        return None
    return shifted_start, shifted_end


def band_rect(shifted_start: int, shifted_end: int, window: VisibleWindow) -> Rect | None:
    """Full-width rectangle for window-relative minute offsets, clamped to the surface."""
    top = max(0.0, shifted_start * window.pixels_per_minute)
    bottom = min(window.pixel_height, shifted_end * window.pixels_per_minute)
    height = bottom - top
    if height <= 0:
        return None
    return Rect(0.0, top, window.pixel_width, height)


def window_band(start: int, end: int, window: VisibleWindow) -> Rect | None:
    """
    Convert a minute range into a rectangle clipped to the visible window.

    Returns None when the range lies outside the window or is clipped to
    nothing.
    """
    shifted = shift_into_window(start, end, window)
    if shifted is None:
        return None
    return band_rect(*shifted, window)
