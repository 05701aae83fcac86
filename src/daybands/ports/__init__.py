"""Ports - interfaces/protocols for external dependencies."""

from .interval_source import IntervalSource
from .band_surface import BandSurface
from .trace_sink import TraceSink

__all__ = [
    "IntervalSource",
    "BandSurface",
    "TraceSink",
]
