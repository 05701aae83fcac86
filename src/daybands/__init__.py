"""daybands - pause bands and week layout for calendar day columns."""

__version__ = "0.1.0"
