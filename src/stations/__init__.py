"""Station name lookup for user input."""

from .matching import normalize_station_name, suggest_station_names
from .resolver import StationResolver

__all__ = ["StationResolver", "normalize_station_name", "suggest_station_names"]
