"""StationHub: shift templates for the station resource hub."""

__version__ = "0.3.0"
