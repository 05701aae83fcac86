"""Hour grid line positions on the minute-to-pixel scale."""

from .intervals import VisibleWindow


def line_offsets(window: VisibleWindow, step_minutes: int) -> list[float]:
    """
    Y offsets of grid lines every `step_minutes` inside the visible window.

    The top edge is not included; the bottom edge is not included either,
    since both belong to the surrounding frame.
    """
    if step_minutes <= 0:
        raise ValueError(f"step_minutes must be positive, got {step_minutes}")

    offsets = []
    minute = step_minutes
    while minute < window.visible_minutes:
        y = minute * window.pixels_per_minute
        if y >= window.pixel_height:
            break
        offsets.append(y)
        minute += step_minutes
    return offsets


def hour_line_offsets(window: VisibleWindow) -> list[float]:
    return line_offsets(window, 60)


def minor_line_offsets(window: VisibleWindow, step_minutes: int) -> list[float]:
    """Half- or quarter-hour lines, without the ones that fall on an hour."""
    return [
        y for i, y in enumerate(line_offsets(window, step_minutes), start=1)
        if (i * step_minutes) % 60
    ]
