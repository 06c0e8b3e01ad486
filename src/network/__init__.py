"""Metro network model: stations, trips and the graph built from them."""

from .graph import MetroNetwork
from .records import Station, Trip, normalize_line, parse_station, parse_trip

__all__ = [
    "MetroNetwork",
    "Station",
    "Trip",
    "normalize_line",
    "parse_station",
    "parse_trip",
]
