"""Exceptions raised by the metro itinerary finder."""


class MetroError(Exception):
    """Base class for all errors raised by the package."""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ParseError(MetroError):
    """A station or trip record could not be parsed."""

    def __init__(self, message: str, line_number: int | None = None, record: str = ""):
        self.line_number = line_number
        self.record = record
        if line_number is not None:
            message = f"line {line_number}: {message}: {record!r}"
        elif record:
            message = f"{message}: {record!r}"
        super().__init__(message, code="PARSE_ERROR")


class NetworkError(MetroError):
    def __init__(self, message: str = "Invalid metro network"):
        super().__init__(message, code="INVALID_NETWORK")


class StationNotFoundError(MetroError):
    def __init__(self, message: str = "Station not found"):
        super().__init__(message, code="STATION_NOT_FOUND")


class RouteNotFoundError(MetroError):
    def __init__(self, message: str = "No route between stations"):
        super().__init__(message, code="ROUTE_NOT_FOUND")
