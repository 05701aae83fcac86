"""Painting layer - runs the projector per column and hands bands to a surface."""

import logging
from datetime import date

from .config import Config
from .core.grid import hour_line_offsets, minor_line_offsets
from .core.intervals import Rect, TimeInterval
from .core.projector import BandPaintInputs, project, should_repaint
from .core.week import filter_week_days, full_width_bands
from .ports import BandSurface, TraceSink

logger = logging.getLogger(__name__)

DEFAULT_BAR_COLOR = "#4A90D9"


class BandPainter:
    """
    Paints the pause bands of one day column.

    Holds an immutable snapshot of its inputs so a caller can compare the
    painter it drew last time with a fresh one before repainting.
    """

    def __init__(self, inputs: BandPaintInputs, origin_x: float = 0.0):
        self.inputs = inputs
        self.origin_x = origin_x

    def paint(self, surface: BandSurface, trace: TraceSink | None = None) -> list[Rect]:
        """Fill every visible pause band; returns the rectangles in surface coordinates."""
        bands = [
            rect.translate(dx=self.origin_x)
            for rect in project(list(self.inputs.intervals), self.inputs.window, trace)
        ]
        for rect in bands:
            surface.fill_rect(rect, self.inputs.color)
        return bands

    def should_repaint(self, old: "BandPainter | None") -> bool:
        if old is None or old.origin_x != self.origin_x:
            return True
        return should_repaint(old.inputs, self.inputs)


def paint_grid(surface: BandSurface, config: Config, column_date: date, width: float) -> None:
    """Draw hour lines, plus half/quarter-hour lines when enabled."""
    window = config.window(column_date)
    minor_step = 15 if config.show_quarter_hours else 30 if config.show_half_hours else None
    if minor_step:
        for y in minor_line_offsets(window, minor_step):
            surface.draw_hline(y, 0, width, config.grid_color)
    for y in hour_line_offsets(window):
        surface.draw_hline(y, 0, width, config.grid_color)


def paint_week(
    intervals: list[TimeInterval],
    dates: list[date],
    config: Config,
    surface: BandSurface,
    trace: TraceSink | None = None,
) -> dict[date, list[Rect]]:
    """
    Paint a week of day columns.

    Layer order: pause bands, hour grid, column separators, full-width bars.

    Returns:
        Pause bands painted per shown column date, in surface coordinates.
    """
    columns = filter_week_days(dates, config.week_days)
    if not columns:
        logger.info("No week days to paint")
        return {}

    width = config.column_width * len(columns)
    painted: dict[date, list[Rect]] = {}

    for index, column_date in enumerate(columns):
        inputs = BandPaintInputs.build(intervals, config.window(column_date), config.pause_color)
        painter = BandPainter(inputs, origin_x=index * config.column_width)
        painted[column_date] = painter.paint(surface, trace)

    paint_grid(surface, config, columns[0], width)
    for index in range(1, len(columns)):
        surface.draw_vline(index * config.column_width, 0, config.column_height, config.grid_color)

    bars = full_width_bands(intervals, columns, config.window(columns[0]), config.column_width)
    for interval, rect in bars:
        surface.fill_rect(rect, interval.color or DEFAULT_BAR_COLOR)

    logger.debug(
        f"Painted {sum(len(b) for b in painted.values())} pause bands and "
        f"{len(bars)} full-width bars over {len(columns)} columns"
    )
    return painted
