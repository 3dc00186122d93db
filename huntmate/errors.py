# huntmate/errors.py
from typing import Optional


class HuntMateError(Exception):
    """Base class for every error raised by huntmate."""


class NoMatchError(HuntMateError):
    """The geocoder returned nothing usable for a query."""

    def __init__(self, query: str, detail: str = "no results"):
        self.query = query
        super().__init__(f"Could not geocode '{query}': {detail}")


class UpstreamError(HuntMateError):
    """Transport-level failure talking to an external service."""

    def __init__(self, source: str, cause: Optional[BaseException] = None):
        self.source = source
        self.cause = cause
        super().__init__(f"{source} request failed: {cause}")


class MalformedResponseError(UpstreamError):
    """The service answered, but the body is not the JSON we expect."""


class ConfigError(HuntMateError):
    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for {name}: {value!r}")
