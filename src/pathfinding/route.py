"""Route reconstruction: path, transfers and direction of travel."""

import logging
from collections.abc import Sequence

from src.exceptions import RouteNotFoundError
from src.network import MetroNetwork

from .itinerary import Itinerary

logger = logging.getLogger(__name__)


def reconstruct_path(
    start: int, end: int, predecessors: Sequence[int | None]
) -> list[int]:
    """
    Walk the predecessor chain back from ``end`` to ``start``.

    Returns:
        Station ids from start to end, both included

    Raises:
        RouteNotFoundError: if the chain stops before reaching ``start``
    """
    path = [end]
    current = end
    while current != start:
        previous = predecessors[current]
        if previous is None or len(path) > len(predecessors):
            raise RouteNotFoundError(
                f"No route from station {start} to station {end}"
            )
        path.append(previous)
        current = previous
    path.reverse()
    return path


def get_terminus(network: MetroNetwork, previous: int, current: int) -> int:
    """
    Find the terminus reached by riding the line of ``current`` away from
    ``previous``.

    At each station the last same-line neighbour in trip order, other than
    the station just left, is taken as the next stop.
    """
    stations = network.stations
    seen = {previous, current}

    while not stations[current].is_terminus:
        line = stations[current].line
        candidate = None
        for other, _ in network.neighbors(current):
            if other != previous and stations[other].line == line:
                candidate = other

        if candidate is None or candidate in seen:
            logger.warning(
                "Line %s has no terminus beyond station %d (%s)",
                line,
                current,
                stations[current].name,
            )
            break

        seen.add(candidate)
        previous, current = current, candidate

    return stations[current].id


def reconstruct_route(
    network: MetroNetwork,
    start: int,
    end: int,
    predecessors: Sequence[int | None],
    total_seconds: int,
) -> Itinerary:
    """
    Build the itinerary for a searched route.

    A transfer is recorded wherever two consecutive stations of the path
    are on different lines: the transfer station is the one where the
    rider changes, and the new direction is looked up from the pair that
    crosses onto the new line.
    """
    path = reconstruct_path(start, end, predecessors)
    if len(path) == 1:
        return Itinerary.trivial(start)

    stations = network.stations
    transfers = []
    positions = []
    directions = [get_terminus(network, path[0], path[1])]

    for i in range(1, len(path)):
        if stations[path[i - 1]].line != stations[path[i]].line:
            transfers.append(stations[path[i - 1]])
            positions.append(i)
            directions.append(get_terminus(network, path[i - 1], path[i]))

    return Itinerary(
        start_id=start,
        end_id=end,
        found=True,
        total_seconds=total_seconds,
        path=tuple(path),
        transfer_stations=tuple(transfers),
        direction_termini=tuple(directions),
        transfer_positions=tuple(positions),
    )
