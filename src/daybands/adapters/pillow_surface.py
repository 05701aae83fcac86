"""Pillow surface adapter - draws bands onto an in-memory image."""

import logging
from pathlib import Path

from PIL import Image, ImageDraw

from daybands.core.intervals import Rect

logger = logging.getLogger(__name__)


class PillowSurface:
    """
    Pillow image surface.

    Implements BandSurface protocol. Coordinates are image pixels; a
    rectangle covers [x, right) x [y, bottom).
    """

    def __init__(self, width: int, height: int, background: str = "white"):
        self.width = width
        self.height = height
        self.image = Image.new("RGB", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)

    def fill_rect(self, rect: Rect, color: str) -> None:
        """Fill an axis-aligned rectangle with a solid color."""
        x0, y0 = round(rect.x), round(rect.y)
        x1, y1 = round(rect.right) - 1, round(rect.bottom) - 1
        if x1 < x0 or y1 < y0:
            logger.debug(f"Rect {rect} rounds to nothing, not drawn")
            return
        self._draw.rectangle([x0, y0, x1, y1], fill=color)

    def draw_hline(self, y: float, x0: float, x1: float, color: str) -> None:
        """Draw a one pixel horizontal line from x0 to x1."""
        row = round(y)
        self._draw.line([round(x0), row, round(x1) - 1, row], fill=color, width=1)

    def draw_vline(self, x: float, y0: float, y1: float, color: str) -> None:
        """Draw a one pixel vertical line from y0 to y1."""
        col = round(x)
        self._draw.line([col, round(y0), col, round(y1) - 1], fill=color, width=1)

    def save(self, path: Path | str) -> Path:
        """Write the image to disk; the format follows the file extension."""
        path = Path(path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path)
        logger.info(f"Saved {self.width}x{self.height} image to {path}")
        return path
