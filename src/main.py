"""
Metro Itinerary Finder - Main entry point.

Usage:
    python -m src.main
    python -m src.main data/metro.txt -d "Nation" -a "Les Halles"
    python -m src.main --help
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from src.console import format_itinerary
from src.exceptions import MetroError, StationNotFoundError
from src.network import MetroNetwork
from src.pathfinding import Itinerary, PathFinder
from src.stations import StationResolver

# Default data paths
DATA_DIR = Path(__file__).parent.parent / "data"
NETWORK_FILE = Path(os.getenv("METRO_NETWORK_FILE", DATA_DIR / "metro.txt"))

EXIT_OK = 0
EXIT_BAD_NETWORK = 1
EXIT_NO_ROUTE = 2


def find_itinerary(
    network: MetroNetwork,
    departure: str | None = None,
    arrival: str | None = None,
) -> Itinerary:
    """
    Resolve departure and arrival names and find the best route.

    Names not given are asked interactively.

    Raises:
        StationNotFoundError: if a given name matches no station
    """
    resolver = StationResolver(network)

    if departure is None:
        departures = resolver.prompt("Departure")
    else:
        departures = resolver.resolve_or_raise(departure)

    if arrival is None:
        arrivals = resolver.prompt("Arrival")
    else:
        arrivals = resolver.resolve_or_raise(arrival)

    return PathFinder(network).find_best_route(departures, arrivals)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Metro Itinerary Finder - Fastest route between two metro stations"
    )
    parser.add_argument(
        "network",
        nargs="?",
        type=Path,
        default=NETWORK_FILE,
        help=f"Network description file (default: {NETWORK_FILE})",
    )
    parser.add_argument(
        "-d",
        "--departure",
        help="Departure station name (prompted if omitted)",
    )
    parser.add_argument(
        "-a",
        "--arrival",
        help="Arrival station name (prompted if omitted)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Plain output without terminal colors",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.network.exists():
        print(f"Error: Network file not found: {args.network}", file=sys.stderr)
        return EXIT_BAD_NETWORK

    try:
        network = MetroNetwork.from_file(args.network)
    except MetroError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_BAD_NETWORK

    try:
        itinerary = find_itinerary(network, args.departure, args.arrival)
    except StationNotFoundError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_NO_ROUTE

    print()
    print(format_itinerary(network, itinerary, color=not args.no_color))
    print()
    return EXIT_OK if itinerary.found else EXIT_NO_ROUTE


if __name__ == "__main__":
    sys.exit(main())
