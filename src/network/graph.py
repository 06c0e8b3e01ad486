"""Metro network graph construction from station and trip records."""

import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

import networkx as nx

from src.exceptions import NetworkError, StationNotFoundError

from .records import STATION_PREFIX, TRIP_PREFIX, Station, Trip, parse_station, parse_trip

logger = logging.getLogger(__name__)


class MetroNetwork:
    """
    Graph representation of a metro network.

    Nodes are station ids, edges are trips. Station ids must form the
    contiguous range 0..n-1 so that a station's id is also its index in
    ``stations``. Parallel trips between the same pair of stations are
    kept as separate keyed edges of a ``networkx.MultiGraph``.

    The network is immutable once built.
    """

    def __init__(self, stations: Iterable[Station], trips: Iterable[Trip]):
        """
        Build and validate a network.

        Args:
            stations: Station records, in any order
            trips: Trip records, in registry order

        Raises:
            NetworkError: if ids are duplicated or not contiguous from 0,
                or if a trip references an unknown station
        """
        self._stations = self._index_stations(stations)
        self._trips = tuple(trips)

        graph = nx.MultiGraph()
        graph.add_nodes_from(
            (s.id, {"line": s.line, "terminus": s.is_terminus, "name": s.name})
            for s in self._stations
        )
        for order, trip in enumerate(self._trips):
            for endpoint in (trip.station_a, trip.station_b):
                if endpoint not in graph:
                    raise NetworkError(
                        f"Trip #{order} ({trip.station_a} - {trip.station_b}) "
                        f"references unknown station {endpoint}"
                    )
            graph.add_edge(
                trip.station_a,
                trip.station_b,
                key=order,
                weight=trip.travel_seconds,
            )
        self._graph = nx.freeze(graph)
        self._neighbors = lru_cache(maxsize=None)(self._incident_trips)

    @staticmethod
    def _index_stations(stations: Iterable[Station]) -> tuple[Station, ...]:
        by_id: dict[int, Station] = {}
        for station in stations:
            if station.id in by_id:
                raise NetworkError(f"Duplicate station id {station.id}")
            by_id[station.id] = station

        missing = [i for i in range(len(by_id)) if i not in by_id]
        if missing:
            raise NetworkError(
                f"Station ids must be contiguous from 0, missing id {missing[0]}"
            )
        return tuple(by_id[i] for i in range(len(by_id)))

    @classmethod
    def from_records(cls, lines: Iterable[str]) -> "MetroNetwork":
        """
        Build a network from the lines of a network description.

        Lines starting with ``V`` are stations, lines starting with ``E``
        are trips. Every other line is ignored.

        Raises:
            ParseError: on the first malformed record
            NetworkError: if the records do not form a valid network
        """
        stations = []
        trips = []
        for line_number, line in enumerate(lines, start=1):
            if line.startswith(STATION_PREFIX):
                stations.append(parse_station(line, line_number))
            elif line.startswith(TRIP_PREFIX):
                trips.append(parse_trip(line, line_number))

        network = cls(stations, trips)
        logger.info(
            "Loaded metro network: %d stations, %d trips, %d lines",
            len(network.stations),
            len(network.trips),
            len(network.lines()),
        )
        return network

    @classmethod
    def from_file(cls, filepath: str | Path) -> "MetroNetwork":
        """Load a network from a description file."""
        filepath = Path(filepath)
        logger.debug("Reading metro network from %s", filepath)
        with open(filepath, encoding="utf-8") as f:
            return cls.from_records(f)

    @property
    def stations(self) -> tuple[Station, ...]:
        """All stations, indexed by id."""
        return self._stations

    @property
    def trips(self) -> tuple[Trip, ...]:
        """All trips, in registry order."""
        return self._trips

    @property
    def graph(self) -> nx.MultiGraph:
        """Read-only graph view of the network."""
        return self._graph

    def station(self, station_id: int) -> Station:
        """Get a station by id."""
        if station_id not in self:
            raise StationNotFoundError(f"Unknown station id: {station_id}")
        return self._stations[station_id]

    def _incident_trips(self, station_id: int) -> tuple[tuple[int, int], ...]:
        edges = sorted(
            self._graph.edges(station_id, keys=True, data="weight"),
            key=lambda edge: edge[2],
        )
        return tuple((other, weight) for _, other, _, weight in edges)

    def neighbors(self, station_id: int) -> list[tuple[int, int]]:
        """
        Get every trip incident to a station.

        Returns:
            List of (other station id, travel seconds), in trip registry
            order, parallel trips included
        """
        if station_id not in self:
            raise StationNotFoundError(f"Unknown station id: {station_id}")
        return list(self._neighbors(station_id))

    def station_ids_by_name(self, name: str) -> list[int]:
        """Get the ids of all stations with exactly this name."""
        return [s.id for s in self._stations if s.name == name]

    def station_names(self) -> list[str]:
        """Get distinct station names, in id order."""
        return list(dict.fromkeys(s.name for s in self._stations))

    def lines(self) -> list[str]:
        """Get distinct line identifiers, in id order."""
        return list(dict.fromkeys(s.line for s in self._stations))

    def is_connected(self, station1: int, station2: int) -> bool:
        """Check whether any route links two stations."""
        return nx.has_path(self._graph, station1, station2)

    def __contains__(self, station_id: object) -> bool:
        return isinstance(station_id, int) and 0 <= station_id < len(self._stations)

    def __len__(self) -> int:
        """Return number of stations."""
        return len(self._stations)
