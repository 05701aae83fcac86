"""Adapters - I/O implementations of ports."""

from .json_intervals import JsonIntervalSource, IntervalSourceError
from .pillow_surface import PillowSurface
from .logging_trace import LoggingTraceSink

__all__ = [
    "JsonIntervalSource",
    "IntervalSourceError",
    "PillowSurface",
    "LoggingTraceSink",
]
