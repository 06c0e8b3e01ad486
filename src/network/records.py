"""Station and trip records of a metro network description.

A network file holds one record per line:

    V <id> <line> <terminus 0|1> <name>
    E <station a> <station b> <travel seconds>
"""

from dataclasses import dataclass

from src.exceptions import ParseError

STATION_PREFIX = "V"
TRIP_PREFIX = "E"


@dataclass(frozen=True)
class Station:
    """A metro station."""

    id: int
    line: str
    is_terminus: bool
    name: str


@dataclass(frozen=True)
class Trip:
    """An undirected trip between two stations."""

    station_a: int
    station_b: int
    travel_seconds: int

    def connects(self, station_id: int) -> bool:
        return station_id == self.station_a or station_id == self.station_b

    def other(self, station_id: int) -> int:
        """Return the endpoint opposite to ``station_id``."""
        if station_id == self.station_a:
            return self.station_b
        if station_id == self.station_b:
            return self.station_a
        raise ValueError(f"Station {station_id} is not an endpoint of {self}")


def _fields(text: str, prefix: str, count: int) -> list[str]:
    """Strip the record prefix and split the rest into at most ``count`` fields."""
    body = text
    if body.startswith(prefix + " "):
        body = body[len(prefix) + 1 :]
    elif body.startswith(prefix):
        body = body[len(prefix) :]
    return body.split(" ", count - 1)


def _parse_int(value: str, field_name: str, text: str, line_number: int | None) -> int:
    if not (value.isascii() and value.isdigit()):
        raise ParseError(
            f"{field_name} is not a non-negative integer", line_number, text
        )
    return int(value)


def normalize_line(line: str) -> str:
    """
    Normalize a line identifier by stripping its zero padding.

    Examples:
        "04" -> "4"
        "3bis" -> "3bis"
        "07bis" -> "7bis"
    """
    return line.lstrip("0")


def parse_station(text: str, line_number: int | None = None) -> Station:
    """
    Parse a station record.

    Example:
        "V 0042 04 0 Les Halles" -> Station(42, "4", False, "Les Halles")

    Raises:
        ParseError: if the record is malformed
    """
    text = text.rstrip("\r\n")
    parsed = _fields(text, STATION_PREFIX, 4)
    if len(parsed) != 4 or not parsed[3]:
        raise ParseError("station record needs 4 fields", line_number, text)

    raw_id, line, flag, name = parsed
    if flag not in ("0", "1"):
        raise ParseError("terminus flag must be 0 or 1", line_number, text)

    return Station(
        id=_parse_int(raw_id, "station id", text, line_number),
        line=normalize_line(line),
        is_terminus=flag == "1",
        name=name,
    )


def parse_trip(text: str, line_number: int | None = None) -> Trip:
    """
    Parse a trip record.

    Example:
        "E 0042 0069 420" -> Trip(42, 69, 420)

    Raises:
        ParseError: if the record is malformed
    """
    text = text.rstrip("\r\n")
    parsed = _fields(text, TRIP_PREFIX, 3)
    if len(parsed) != 3 or " " in parsed[2].strip():
        raise ParseError("trip record needs 3 fields", line_number, text)

    return Trip(
        station_a=_parse_int(parsed[0], "station id", text, line_number),
        station_b=_parse_int(parsed[1], "station id", text, line_number),
        travel_seconds=_parse_int(parsed[2].strip(), "travel time", text, line_number),
    )
