"""Pathfinding module for finding metro routes."""

from .dijkstra import STOP_PENALTY, PathFinder, SearchResult, shortest_paths
from .itinerary import Itinerary, split_seconds
from .route import get_terminus, reconstruct_path, reconstruct_route

__all__ = [
    "STOP_PENALTY",
    "Itinerary",
    "PathFinder",
    "SearchResult",
    "get_terminus",
    "reconstruct_path",
    "reconstruct_route",
    "shortest_paths",
    "split_seconds",
]
