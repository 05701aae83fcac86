"""Week column layout - dates, visible weekdays and full-width bars."""

from dataclasses import replace
from datetime import date, timedelta

from .intervals import (
    Rect,
    TimeInterval,
    VisibleWindow,
    effective_minute_range,
    window_band,
)

ALL_WEEK_DAYS = (1, 2, 3, 4, 5, 6, 7)


def week_dates(start: date, days: int = 7) -> list[date]:
    """Consecutive dates starting at `start`."""
    return [start + timedelta(days=i) for i in range(days)]


def filter_week_days(dates: list[date], week_days: list[int] | tuple[int, ...] = ALL_WEEK_DAYS) -> list[date]:
    """Keep dates whose ISO weekday (1 = Monday, 7 = Sunday) is shown."""
    shown = set(week_days)
    return [d for d in dates if d.isoweekday() in shown]


def full_width_bands(
    intervals: list[TimeInterval],
    dates: list[date],
    window: VisibleWindow,
    column_width: float,
) -> list[tuple[TimeInterval, Rect]]:
    """
    Bars for full-width intervals, spanning every column of the week.

    Pure function - no I/O.

    An interval is collected once, on the first date it covers; its minute
    range for that date is clipped to the window exactly like a pause band.
    Pause intervals are left to the per-column projection.

    Returns:
        (interval, rect) pairs in collection order, rects `column_width *
        len(dates)` wide.
    """
    if not dates:
        return []

    span = replace(window, column_date=dates[0], pixel_width=column_width * len(dates))

    bars: list[tuple[TimeInterval, Rect]] = []
    seen: set[tuple] = set()

    for column_date in dates:
        for interval in intervals:
            if interval.is_pause or not interval.is_full_width:
                continue
            key = (interval.id, interval.paint_key())
            if key in seen:
                continue
            minutes = effective_minute_range(interval, column_date)
            if minutes is None:
                continue
            seen.add(key)
            rect = window_band(*minutes, span)
            if rect is not None:
                bars.append((interval, rect))

    return bars
