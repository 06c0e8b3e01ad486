"""Itinerary value produced by a route search."""

from dataclasses import dataclass

from src.network import Station


def split_seconds(seconds: int) -> tuple[int, int]:
    """Split a duration in seconds into (minutes, seconds)."""
    minutes = seconds // 60
    return minutes, seconds - minutes * 60


@dataclass(frozen=True)
class Itinerary:
    """
    Result of a route search between two stations.

    ``transfer_stations`` holds copies of the stations where the rider
    changes line, ``direction_termini`` the id of the terminus to travel
    toward on each line segment (one more entry than transfers for any
    non-trivial route). ``transfer_positions`` gives, for each transfer,
    the index in ``path`` where the new line segment begins.
    """

    start_id: int
    end_id: int
    found: bool
    total_seconds: int | None = None
    path: tuple[int, ...] = ()
    transfer_stations: tuple[Station, ...] = ()
    direction_termini: tuple[int, ...] = ()
    transfer_positions: tuple[int, ...] = ()

    @classmethod
    def trivial(cls, station_id: int) -> "Itinerary":
        """Itinerary from a station to itself."""
        return cls(
            start_id=station_id,
            end_id=station_id,
            found=True,
            total_seconds=0,
            path=(station_id,),
        )

    @classmethod
    def not_found(cls, start_id: int, end_id: int) -> "Itinerary":
        """Itinerary for an unreachable destination."""
        return cls(start_id=start_id, end_id=end_id, found=False)

    @property
    def total_time(self) -> tuple[int, int] | None:
        """Total time as (minutes, seconds), None when no route exists."""
        if self.total_seconds is None:
            return None
        return split_seconds(self.total_seconds)

    @property
    def num_transfers(self) -> int:
        return len(self.transfer_stations)

    @property
    def is_trivial(self) -> bool:
        return self.found and self.start_id == self.end_id

    def segments(self) -> list[tuple[int, ...]]:
        """Split the path into one run of stations per line segment."""
        if not self.path:
            return []
        bounds = [0, *self.transfer_positions, len(self.path)]
        return [self.path[a:b] for a, b in zip(bounds, bounds[1:])]
