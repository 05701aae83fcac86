"""Shared workflow layer between the CLI and library callers.

Each function loads intervals from a source, runs the core layout and
returns or writes the result.
"""

import math
from datetime import date
from pathlib import Path

from .adapters.pillow_surface import PillowSurface
from .config import Config
from .core.intervals import Rect
from .core.projector import project
from .core.week import filter_week_days, week_dates
from .painter import paint_week
from .ports import IntervalSource, TraceSink


def bands_for_day(
    source: IntervalSource,
    column_date: date,
    config: Config,
    trace: TraceSink | None = None,
) -> list[Rect]:
    """Pause bands for one column, in column coordinates."""
    return project(source.fetch_intervals(), config.window(column_date), trace)


def render_week(
    source: IntervalSource,
    start: date,
    config: Config,
    out: Path | str,
    days: int = 7,
    trace: TraceSink | None = None,
) -> Path:
    """Paint a week preview with Pillow and save it; returns the written path."""
    dates = week_dates(start, days)
    columns = filter_week_days(dates, config.week_days)
    if not columns:
        raise ValueError("None of the requested dates is a configured week day")

    # Window validation happens before the surface is allocated.
    config.window(columns[0])

    surface = PillowSurface(
        width=config.column_width * len(columns),
        height=math.ceil(config.column_height),
        background=config.background,
    )
    paint_week(source.fetch_intervals(), dates, config, surface, trace)
    return surface.save(out)
