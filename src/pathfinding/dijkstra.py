"""Dijkstra pathfinding for metro routes."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from src.exceptions import StationNotFoundError
from src.network import MetroNetwork

from .itinerary import Itinerary
from .route import reconstruct_route

logger = logging.getLogger(__name__)

# Dwell time (seconds) added each time a station is reached through a better trip
STOP_PENALTY = 30


@dataclass
class SearchResult:
    """Distances and predecessors from one single-source search."""

    start: int
    distances: list[float]  # seconds, math.inf when unreachable
    predecessors: list[int | None]

    def is_reachable(self, station_id: int) -> bool:
        return self.distances[station_id] != math.inf


def _next_station(distances: Sequence[float], unvisited: list[int]) -> int:
    """Pop the unvisited station with the smallest distance (lowest id on ties)."""
    best = 0
    for i in range(1, len(unvisited)):
        if distances[unvisited[i]] < distances[unvisited[best]]:
            best = i
    return unvisited.pop(best)


def shortest_paths(network: MetroNetwork, start: int) -> SearchResult:
    """
    Run a full single-source search from ``start``.

    Every station is visited; there is no early exit. A trip improves a
    station when ``distance[current] + travel`` beats its distance, and the
    stored distance then also includes STOP_PENALTY, so distances are the
    time to leave each station.
    """
    if start not in network:
        raise StationNotFoundError(f"Unknown station id: {start}")

    distances: list[float] = [math.inf] * len(network)
    predecessors: list[int | None] = [None] * len(network)
    unvisited = list(range(len(network)))
    distances[start] = 0

    while unvisited:
        current = _next_station(distances, unvisited)
        for neighbor, travel in network.neighbors(current):
            if distances[current] + travel < distances[neighbor]:
                distances[neighbor] = distances[current] + travel + STOP_PENALTY
                predecessors[neighbor] = current

    return SearchResult(start=start, distances=distances, predecessors=predecessors)


class PathFinder:
    """
    Find the fastest routes in a metro network.

    Uses a linear-scan Dijkstra over the whole network for every query,
    then rebuilds transfers and directions from the predecessor chain.
    """

    def __init__(self, network: MetroNetwork):
        """
        Initialize pathfinder with a metro network.

        Args:
            network: MetroNetwork instance
        """
        self.network = network

    def find_route(self, start: int, end: int) -> Itinerary:
        """
        Find the fastest route between two stations.

        Args:
            start: Departure station id
            end: Arrival station id

        Returns:
            Itinerary, with ``found`` False when ``end`` cannot be reached

        Raises:
            StationNotFoundError: if either id is not in the network
        """
        for station_id in (start, end):
            if station_id not in self.network:
                raise StationNotFoundError(f"Unknown station id: {station_id}")

        if start == end:
            return Itinerary.trivial(start)

        result = shortest_paths(self.network, start)
        if not result.is_reachable(end):
            logger.debug("No route from %d to %d", start, end)
            return Itinerary.not_found(start, end)

        total_seconds = int(result.distances[end])
        itinerary = reconstruct_route(
            self.network, start, end, result.predecessors, total_seconds
        )
        logger.debug(
            "Route %d -> %d: %ds, %d stations, %d transfers",
            start,
            end,
            total_seconds,
            len(itinerary.path),
            itinerary.num_transfers,
        )
        return itinerary

    def find_best_route(
        self, departures: Sequence[int], arrivals: Sequence[int]
    ) -> Itinerary:
        """
        Find the fastest route among all departure/arrival combinations.

        Useful when a name matches several stations (one per line at a
        transfer hub). Ties keep the first route found.

        Args:
            departures: Candidate departure station ids
            arrivals: Candidate arrival station ids

        Returns:
            Best Itinerary, or a not-found one if no pair is connected
        """
        if not departures or not arrivals:
            raise ValueError("departures and arrivals must not be empty")

        best: Itinerary | None = None
        for departure in departures:
            for arrival in arrivals:
                itinerary = self.find_route(departure, arrival)
                if not itinerary.found:
                    continue
                if best is None or itinerary.total_time < best.total_time:
                    best = itinerary

        if best is None:
            return Itinerary.not_found(departures[0], arrivals[0])
        return best
