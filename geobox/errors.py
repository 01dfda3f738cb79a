from __future__ import annotations

from enum import Enum


class GeoboxError(Exception):
    """Base exception for all geobox errors."""


class Violation(str, Enum):
    lat_inverted = "lat1 > lat2"
    lat1_below = "lat1 < -90"
    lat1_above = "lat1 > 90"
    lat2_below = "lat2 < -90"
    lat2_above = "lat2 > 90"
    lon1_below = "lon1 < -180"
    lon1_above = "lon1 > 180"
    lon2_below = "lon2 < -180"
    lon2_above = "lon2 > 180"
    bad_arity = "bad arity"

    @property
    def field(self) -> str:
        # "lat1 > lat2" -> "lat1"; "bad arity" -> "bbox"
        head = self.value.split(" ", 1)[0]
        return head if head[:3] in {"lat", "lon"} else "bbox"


class ValidationError(GeoboxError, ValueError):
    """Raised when a bbox violates one of its construction invariants."""

    def __init__(self, violation: Violation, message: str | None = None):
        self.violation = violation
        self.field = violation.field
        self.message = message or f"Invalid bbox: {violation.value}"
        super().__init__(self.message)
