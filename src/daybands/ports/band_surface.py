"""Drawing surface interface."""

from typing import Protocol

from daybands.core.intervals import Rect


class BandSurface(Protocol):
    """Interface for anything that can fill rectangles and draw grid lines."""

    def fill_rect(self, rect: Rect, color: str) -> None:
        """Fill an axis-aligned rectangle with a solid color."""
        ...

    def draw_hline(self, y: float, x0: float, x1: float, color: str) -> None:
        """Draw a one pixel horizontal line from x0 to x1."""
        ...

    def draw_vline(self, x: float, y0: float, y1: float, color: str) -> None:
        """Draw a one pixel vertical line from y0 to y1."""
        ...
