"""Resolve station names typed by a user to station ids."""

import logging
from collections.abc import Callable

from src.exceptions import StationNotFoundError
from src.network import MetroNetwork

from .matching import normalize_station_name, suggest_station_names

logger = logging.getLogger(__name__)


class StationResolver:
    """
    Resolve station names to the ids of every matching station.

    A transfer hub appears once per line it serves, so one name usually
    maps to several ids. Exact names are tried first, then names equal
    after normalization (case, accents, hyphens).
    """

    def __init__(self, network: MetroNetwork):
        self.network = network
        self.names = network.station_names()
        self.ids_by_normalized: dict[str, list[int]] = {}
        for station in network.stations:
            key = normalize_station_name(station.name)
            self.ids_by_normalized.setdefault(key, []).append(station.id)

    def resolve(self, name: str) -> list[int]:
        """
        Get all station ids matching a name.

        Returns:
            Matching ids in id order, empty if the name is unknown
        """
        name = name.strip()
        ids = self.network.station_ids_by_name(name)
        if ids:
            return ids
        return list(self.ids_by_normalized.get(normalize_station_name(name), []))

    def suggestions(self, name: str) -> list[str]:
        """Get known station names close to an unknown one."""
        return [match for match, _score in suggest_station_names(name, self.names)]

    def resolve_or_raise(self, name: str) -> list[int]:
        """
        Get all station ids matching a name.

        Raises:
            StationNotFoundError: if no station matches
        """
        ids = self.resolve(name)
        if not ids:
            message = f"Unknown station: {name}"
            suggestions = self.suggestions(name)
            if suggestions:
                message += f" (did you mean {', '.join(suggestions)}?)"
            raise StationNotFoundError(message)
        return ids

    def prompt(
        self,
        label: str,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> list[int]:
        """
        Ask for a station name until it matches at least one station.

        Args:
            label: Prompt shown to the user (e.g. "Departure")
            input_fn: Function reading one line of input (default: input)
            output_fn: Function showing a message to the user (default: print)

        Returns:
            Non-empty list of matching station ids
        """
        input_fn = input_fn or input
        output_fn = output_fn or print
        while True:
            name = input_fn(f"{label}: ")
            try:
                ids = self.resolve_or_raise(name)
            except StationNotFoundError as e:
                logger.debug("Rejected station name %r", name)
                output_fn(f"{e.message}, please check that you have typed correctly.")
                continue
            logger.debug("Station name %r matches ids %s", name, ids)
            return ids
