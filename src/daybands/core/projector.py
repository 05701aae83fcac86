"""Pause interval projection - maps intervals to background bands for one day column."""

from dataclasses import dataclass, field, replace
from datetime import date

from daybands.ports.trace_sink import TraceSink

from .intervals import (
    Rect,
    TimeInterval,
    VisibleWindow,
    band_rect,
    covers_date,
    effective_minute_range,
    shift_into_window,
)

DEFAULT_PAUSE_COLOR = "#E0E0E0"


def pause_intervals(intervals: list[TimeInterval]) -> list[TimeInterval]:
    """Keep only pause intervals, in order."""
    return [i for i in intervals if i.is_pause]


def _tracer(trace: TraceSink | None, column_date: date, interval: TimeInterval):
    def emit(event: str, **details) -> None:
        if trace is not None:
            trace.record(event, column_date, interval.id, **details)

    return emit


def project(
    intervals: list[TimeInterval],
    window: VisibleWindow,
    trace: TraceSink | None = None,
) -> list[Rect]:
    """
    Project pause intervals onto one day column.

    Pure function - no I/O. Decisions are only reported through `trace`.

    Args:
        intervals: All intervals for the render pass; non-pause ones are ignored
        window: Visible hour range, pixel scale and column date
        trace: Optional sink receiving one event per interval decision

    Returns:
        One rectangle per visible pause interval, in input order. Each
        rectangle spans the full surface width and has positive height.
    """
    bands: list[Rect] = []
    column_date = window.column_date

    for interval in pause_intervals(intervals):
        emit = _tracer(trace, column_date, interval)

        if not interval.is_complete:
            emit("skip_incomplete")
            continue

        if not covers_date(interval, column_date):
            emit("skip_other_day", interval_date=interval.date, end_date=interval.end_date)
            continue

        minutes = effective_minute_range(interval, column_date)
        if minutes is None:
            emit("skip_empty_range")
            continue

        shifted = shift_into_window(*minutes, window)
        if shifted is None:
            emit(
                "skip_outside_window",
                minutes_from=minutes[0],
                minutes_to=minutes[1],
                start_hour=window.start_hour,
                end_hour=window.end_hour,
            )
            continue

        rect = band_rect(*shifted, window)
        if rect is None:
            emit("skip_clipped", minutes_from=minutes[0], minutes_to=minutes[1])
            continue

        bands.append(rect)
        emit("painted", top=rect.y, bottom=rect.bottom, height=rect.height)

    return bands


@dataclass(frozen=True)
class BandPaintInputs:
    """Everything a band repaint depends on, snapshotted at build time."""

    intervals: tuple[TimeInterval, ...]
    window: VisibleWindow
    color: str = DEFAULT_PAUSE_COLOR
    keys: tuple = field(default=(), compare=False)

    def __post_init__(self):
        if not self.keys:
            object.__setattr__(self, "keys", tuple(i.paint_key() for i in self.intervals))

    @classmethod
    def build(
        cls,
        intervals: list[TimeInterval],
        window: VisibleWindow,
        color: str = DEFAULT_PAUSE_COLOR,
    ) -> "BandPaintInputs":
        """Snapshot the pause intervals of a render pass; later edits to them are not seen."""
        return cls(tuple(replace(i) for i in pause_intervals(intervals)), window, color)

    def content_key(self) -> tuple:
        return (self.keys, self.window, self.color)


def should_repaint(old: BandPaintInputs | None, new: BandPaintInputs) -> bool:
    """
    Decide whether bands must be repainted.

    Intervals are compared by content (date, start, end) across the whole
    set, never by list identity or length.
    """
    if old is None:
        return True
    return old.content_key() != new.content_key()
