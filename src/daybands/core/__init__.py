"""Functional core - pure layout logic with no I/O."""

from .intervals import (
    Rect,
    TimeInterval,
    VisibleWindow,
    effective_minute_range,
    minutes_of_day,
    window_band,
)
from .projector import BandPaintInputs, pause_intervals, project, should_repaint
from .grid import hour_line_offsets, line_offsets, minor_line_offsets
from .week import filter_week_days, full_width_bands, week_dates

__all__ = [
    # Intervals
    "Rect",
    "TimeInterval",
    "VisibleWindow",
    "effective_minute_range",
    "minutes_of_day",
    "window_band",
    # Projection
    "BandPaintInputs",
    "pause_intervals",
    "project",
    "should_repaint",
    # Grid
    "hour_line_offsets",
    "line_offsets",
    "minor_line_offsets",
    # Week
    "filter_week_days",
    "full_width_bands",
    "week_dates",
]
