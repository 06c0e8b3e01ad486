"""Tests for pathfinding module."""

import math

import pytest

from src.exceptions import RouteNotFoundError, StationNotFoundError
from src.network import MetroNetwork, Station, Trip
from src.pathfinding import (
    STOP_PENALTY,
    Itinerary,
    PathFinder,
    get_terminus,
    reconstruct_path,
    shortest_paths,
    split_seconds,
)


def build_network(stations, trips):
    """Build a network from (line, terminus, name) tuples and (a, b, seconds) tuples."""
    return MetroNetwork(
        [Station(i, line, terminus, name) for i, (line, terminus, name) in enumerate(stations)],
        [Trip(a, b, seconds) for a, b, seconds in trips],
    )


class TestShortestPaths:
    """Tests for the single-source search."""

    @pytest.fixture
    def network(self):
        # A -- B -- C (terminus) on line 1, B -- D on line 2
        return build_network(
            [("1", False, "A"), ("1", False, "B"), ("1", True, "C"), ("2", True, "D")],
            [(0, 1, 60), (1, 2, 60), (1, 3, 30)],
        )

    def test_distances_include_stop_penalty(self, network):
        result = shortest_paths(network, 0)
        assert STOP_PENALTY == 30
        assert result.distances == [0, 90, 180, 150]
        assert result.predecessors == [None, 0, 1, 1]

    def test_unreachable_station_keeps_infinity(self):
        network = build_network(
            [("1", True, "A"), ("1", True, "B"), ("3", True, "E")],
            [(0, 1, 60)],
        )
        result = shortest_paths(network, 0)
        assert result.distances[2] == math.inf
        assert result.predecessors[2] is None
        assert not result.is_reachable(2)

    def test_comparison_uses_raw_travel_time(self):
        # 0 -> 2 -> 1 costs 90 raw, beating the stored 130 of 0 -> 1,
        # even though its stored distance ends up at 150
        network = build_network(
            [("1", True, "A"), ("1", True, "B"), ("1", False, "C")],
            [(0, 1, 100), (0, 2, 10), (2, 1, 80)],
        )
        result = shortest_paths(network, 0)
        assert result.distances[1] == 150
        assert result.predecessors[1] == 2

    def test_equal_distances_visit_lowest_id_first(self):
        # 1 and 2 tie at 40: 1 is visited first, then 2 overwrites 3's predecessor
        network = build_network(
            [("1", True, "A"), ("1", False, "B"), ("1", False, "C"), ("1", True, "D")],
            [(0, 1, 10), (0, 2, 10), (1, 3, 10), (2, 3, 10)],
        )
        result = shortest_paths(network, 0)
        assert result.distances[3] == 80
        assert result.predecessors[3] == 2

    def test_parallel_trips(self):
        network = build_network(
            [("1", True, "A"), ("1", True, "B")],
            [(0, 1, 100), (0, 1, 50)],
        )
        assert shortest_paths(network, 0).distances[1] == 80

    def test_unknown_start(self, network):
        with pytest.raises(StationNotFoundError):
            shortest_paths(network, 9)

    @pytest.mark.parametrize("weight", [10, 60, 200, 1000])
    def test_distance_grows_with_weight(self, weight):
        def distance(w):
            network = build_network(
                [("1", True, "A"), ("1", False, "B"), ("1", True, "C")],
                [(0, 1, w), (1, 2, 60), (0, 2, 400)],
            )
            return shortest_paths(network, 0).distances[2]

        assert distance(weight) <= distance(weight + 50)


class TestRouteReconstruction:
    """Tests for path, transfer and direction reconstruction."""

    def test_reconstruct_path(self):
        assert reconstruct_path(0, 3, [None, 0, 1, 1]) == [0, 1, 3]
        assert reconstruct_path(2, 2, [None, None, None]) == [2]

    def test_reconstruct_path_broken_chain(self):
        with pytest.raises(RouteNotFoundError):
            reconstruct_path(0, 2, [None, 0, None])

    def test_terminus_last_match_wins(self):
        network = build_network(
            [("1", False, "A"), ("1", False, "B"), ("1", True, "C"), ("1", True, "D")],
            [(0, 1, 60), (1, 2, 60), (1, 3, 60)],
        )
        assert get_terminus(network, 0, 1) == 3

    def test_terminus_follows_line_only(self):
        network = build_network(
            [("1", False, "A"), ("1", False, "B"), ("2", True, "X"), ("1", True, "C")],
            [(0, 1, 60), (1, 3, 60), (1, 2, 60)],
        )
        assert get_terminus(network, 0, 1) == 3

    def test_terminus_current_is_terminus(self):
        network = build_network(
            [("1", False, "A"), ("1", True, "B")],
            [(0, 1, 60)],
        )
        assert get_terminus(network, 0, 1) == 1

    def test_terminus_dead_end(self):
        network = build_network(
            [("1", False, "A"), ("1", False, "B"), ("1", False, "C")],
            [(0, 1, 60), (1, 2, 60)],
        )
        assert get_terminus(network, 0, 1) == 2

    def test_terminus_circular_line(self):
        network = build_network(
            [("1", False, "A"), ("1", False, "B"), ("1", False, "C")],
            [(0, 1, 60), (1, 2, 60), (2, 0, 60)],
        )
        assert get_terminus(network, 0, 1) == 2


class TestPathFinder:
    """Tests for PathFinder."""

    @pytest.fixture
    def pathfinder(self):
        # A -- B -- C (terminus) on line 1, B -- D on line 2, E isolated
        network = build_network(
            [
                ("1", False, "A"),
                ("1", False, "B"),
                ("1", True, "C"),
                ("2", True, "D"),
                ("3", True, "E"),
            ],
            [(0, 1, 60), (1, 2, 60), (1, 3, 30)],
        )
        return PathFinder(network)

    def test_single_line(self, pathfinder):
        result = pathfinder.find_route(0, 2)
        assert result.found
        assert result.path == (0, 1, 2)
        assert result.total_seconds == 180
        assert result.total_time == (3, 0)
        assert result.transfer_stations == ()
        assert result.direction_termini == (2,)

    def test_transfer(self, pathfinder):
        result = pathfinder.find_route(0, 3)
        assert result.found
        assert result.path == (0, 1, 3)
        assert result.total_time == (2, 30)
        assert [s.id for s in result.transfer_stations] == [1]
        assert result.direction_termini == (2, 3)
        assert result.segments() == [(0, 1), (3,)]

    def test_same_station(self, pathfinder):
        result = pathfinder.find_route(1, 1)
        assert result.found
        assert result.is_trivial
        assert result.path == (1,)
        assert result.total_time == (0, 0)
        assert result.num_transfers == 0
        assert result.direction_termini == ()

    def test_no_path(self, pathfinder):
        result = pathfinder.find_route(0, 4)
        assert not result.found
        assert result.path == ()
        assert result.total_time is None

    def test_unknown_station(self, pathfinder):
        with pytest.raises(StationNotFoundError):
            pathfinder.find_route(0, 42)

    @pytest.mark.parametrize("start,end", [(0, 2), (0, 3), (2, 3), (3, 0), (2, 0)])
    def test_route_invariants(self, pathfinder, start, end):
        result = pathfinder.find_route(start, end)
        assert len(result.direction_termini) == len(result.transfer_stations) + 1
        assert sum(result.segments(), ()) == result.path
        assert result.path[0] == start
        assert result.path[-1] == end


class TestFindBestRoute:
    """Tests for best-of-N route selection."""

    @pytest.fixture
    def pathfinder(self):
        network = build_network(
            [
                ("1", True, "A"),
                ("1", False, "B"),
                ("1", True, "C"),
                ("2", True, "D"),
                ("3", True, "E"),
            ],
            [(0, 1, 60), (1, 2, 60), (1, 3, 30)],
        )
        return PathFinder(network)

    def test_picks_fastest_pair(self, pathfinder):
        result = pathfinder.find_best_route([0, 1], [2])
        assert result.start_id == 1
        assert result.total_time == (1, 30)

    def test_ties_keep_first(self, pathfinder):
        result = pathfinder.find_best_route([1], [0, 2])
        assert result.total_time == (1, 30)
        assert result.end_id == 0

    def test_skips_unreachable_pairs(self, pathfinder):
        result = pathfinder.find_best_route([4, 0], [2])
        assert result.found
        assert result.start_id == 0

    def test_nothing_reachable(self, pathfinder):
        result = pathfinder.find_best_route([4], [0, 2])
        assert not result.found
        assert (result.start_id, result.end_id) == (4, 0)

    def test_empty_candidates(self, pathfinder):
        with pytest.raises(ValueError):
            pathfinder.find_best_route([], [2])


class TestItinerary:
    """Tests for the Itinerary value."""

    def test_split_seconds(self):
        assert split_seconds(0) == (0, 0)
        assert split_seconds(150) == (2, 30)
        assert split_seconds(3599) == (59, 59)

    def test_not_found(self):
        itinerary = Itinerary.not_found(3, 7)
        assert not itinerary.found
        assert itinerary.segments() == []
        assert not itinerary.is_trivial
