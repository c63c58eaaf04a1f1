"""
Error model for GeoJSON decoding and validation.

Failures are reported with a fixed domain string and a coarse numeric code.
The message carries the detail (what went wrong and where), the code only
says which kind of failure it was.
"""

from dataclasses import dataclass
from enum import IntEnum

ERROR_DOMAIN = "GeoJSONErrorDomain"


class ErrorCode(IntEnum):
    """Numeric codes attached to a GeoJSONError."""

    INVALID_JSON = 1
    """The input text is not valid JSON."""

    INVALID_GEOJSON_OBJECT = 2
    """The JSON parsed but does not follow the GeoJSON grammar."""


@dataclass(frozen=True)
class GeoJSONError:
    """An error attached to a GeoJSON root that failed to decode."""

    code: ErrorCode
    """Kind of failure."""

    message: str = ""
    """Human-readable description, including the location when known."""

    domain: str = ERROR_DOMAIN
    """Origin of the error."""

    def __str__(self) -> str:
        return f"[{self.domain}:{int(self.code)}] {self.message}"


class GeoJSONException(ValueError):
    """Base class for errors raised while building or decoding GeoJSON values."""

    code = ErrorCode.INVALID_GEOJSON_OBJECT

    def __init__(self, message: str, path: str = "") -> None:
        self.message = message
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        if self.path:
            return f"{self.message} - at `{self.path}`"
        return self.message

    def at(self, path: str) -> "GeoJSONException":
        """Return this error located at `path`, unless it already has a location."""
        if self.path:
            return self
        return type(self)(self.message, path)

    def to_error(self) -> GeoJSONError:
        """Convert to the value attached to a failed GeoJSON root."""
        return GeoJSONError(code=self.code, message=self._format())


class MalformedJSONError(GeoJSONException):
    """The input could not be parsed as JSON."""

    code = ErrorCode.INVALID_JSON


class InvalidGeoJSONObjectError(GeoJSONException):
    """The input is JSON but violates the GeoJSON grammar or a geometry invariant."""

    code = ErrorCode.INVALID_GEOJSON_OBJECT
