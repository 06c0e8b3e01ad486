"""Console rendering of itineraries."""

from src.network import MetroNetwork
from src.pathfinding import Itinerary

BOLD = "\x1b[1m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"


def format_duration(time: tuple[int, int] | None) -> str:
    """Format a (minutes, seconds) duration to a human readable string."""
    if time is None:
        return ""
    minutes, seconds = time
    return f"{minutes} mins, {seconds} secs"


def format_itinerary(
    network: MetroNetwork, itinerary: Itinerary, color: bool = True
) -> str:
    """
    Render an itinerary as the text shown in the terminal.

    Each line segment is shown with its line, boarding station and the
    terminus to travel toward:

        Trip time: 3 mins, 0 secs

        A
        |
        1 - A
        |	Towards C
        |
        C
    """
    bold, green, reset = (BOLD, GREEN, RESET) if color else ("", "", "")
    start = network.station(itinerary.start_id)
    end = network.station(itinerary.end_id)

    if not itinerary.found:
        return f"No route from {bold}{start.name}{reset} to {bold}{end.name}{reset}"

    out = [
        f"Trip time: {bold}{format_duration(itinerary.total_time)}{reset}",
        "",
        f"{bold}{start.name}{reset}",
        "|",
    ]

    # boarding station of every segment: the start, then each new line
    boardings = [start] + [
        network.station(itinerary.path[i]) for i in itinerary.transfer_positions
    ]
    for boarding, terminus_id in zip(boardings, itinerary.direction_termini):
        terminus = network.station(terminus_id)
        out.append(f"{bold}{green}{boarding.line}{reset} - {bold}{boarding.name}{reset}")
        out.append(f"|\tTowards {terminus.name}")
        out.append("|")

    out.append(f"{bold}{end.name}{reset}")
    return "\n".join(out)
