from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Sequence, Union

from shapely.geometry import Polygon

from geobox.config import default_decimals
from geobox.envelope import envelope
from geobox.errors import ValidationError, Violation
from geobox.lon_range import denormalize, intersect_ranges, normalize, normalize_lon
from geobox.tiles import MAX_MERCATOR_LAT, tile_bbox

logger = logging.getLogger(__name__)

Coordinate = tuple[float, float]


@dataclass(frozen=True)
class BBox:
    """
    WGS84 bounding box in lon/lat degrees, always 2d.

    Convention: (lon1, lat1, lon2, lat2), i.e. west, south, east, north.

    - Latitudes are never inverted: lat1 <= lat2.
    - Longitudes may be: lon1 > lon2 means the box wraps around the date line
      (east of lon1, across +-180, up to lon2).
    """

    lon1: float
    lat1: float
    lon2: float
    lat2: float

    def __post_init__(self) -> None:
        for name in ("lon1", "lat1", "lon2", "lat2"):
            object.__setattr__(self, name, float(getattr(self, name)))

        violation = _find_violation(self.lon1, self.lat1, self.lon2, self.lat2)
        if violation is not None:
            logger.debug("rejecting bbox %r: %s", self.bbox, violation.value)
            raise ValidationError(violation)

    # Factories

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "BBox":
        """
        Build from a GeoJSON bbox array.

        A 3d array `[lon1, lat1, elev1, lon2, lat2, elev2]` has its elevations dropped.
        """
        return cls(*ensure_bbox_2d(values))

    @classmethod
    def of(cls, value: "BBoxLike") -> "BBox":
        if isinstance(value, BBox):
            return cls(*value.bbox)
        return cls.from_array(value)

    @classmethod
    def world(cls, lat_extent: float = MAX_MERCATOR_LAT) -> "BBox":
        # Default extent excludes the poles, which Web Mercator cannot project.
        return cls(-180.0, -lat_extent, 180.0, lat_extent)

    @classmethod
    def zero(cls) -> "BBox":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_tile(cls, z: int, x: int, y: int) -> "BBox":
        return cls(*tile_bbox(z, x, y))

    @classmethod
    def around(cls, *geometries: Any) -> "BBox":
        """
        Smallest bbox enclosing `geometries` (GeoJSON mappings or geometry objects).
        """
        return cls(*envelope(geometries))

    # Derived

    @property
    def bbox(self) -> tuple[float, float, float, float]:
        return (self.lon1, self.lat1, self.lon2, self.lat2)

    @property
    def lonspan(self) -> float:
        if self.inverted:
            return 360.0 - abs(self.lon1 - self.lon2)
        return self.lon2 - self.lon1

    @property
    def latspan(self) -> float:
        return self.lat2 - self.lat1

    @property
    def inverted(self) -> bool:
        """
        True if lon1 > lon2, i.e. the box crosses the date line.

        The world bbox also touches the date line but is not inverted.
        """
        return self.lon1 > self.lon2

    @property
    def wraps_around(self) -> bool:
        return self.inverted or self.lon1 == -180 or self.lon2 == 180

    @property
    def is_global(self) -> bool:
        return (
            self.lon1 <= -180
            and self.lon2 >= 180
            and self.lat1 <= -90
            and self.lat2 >= 90
        )

    @property
    def south_west(self) -> Coordinate:
        return (self.lon1, self.lat1)

    @property
    def north_west(self) -> Coordinate:
        return (self.lon1, self.lat2)

    @property
    def south_east(self) -> Coordinate:
        return (self.lon2, self.lat1)

    @property
    def north_east(self) -> Coordinate:
        return (self.lon2, self.lat2)

    @cached_property
    def center(self) -> Coordinate:
        if self.inverted:
            # Midpoint of the wrapped span, not of the unwrapped far side.
            lon = normalize_lon((self.lon1 + self.lon2 + 360.0) / 2.0)
        else:
            lon = (self.lon1 + self.lon2) / 2.0
        return (lon, (self.lat1 + self.lat2) / 2.0)

    @cached_property
    def ring(self) -> tuple[Coordinate, ...]:
        """Closed boundary ring: SW, SE, NE, NW, SW."""
        return (
            self.south_west,
            self.south_east,
            self.north_east,
            self.north_west,
            self.south_west,
        )

    @cached_property
    def polygon(self) -> Polygon:
        return Polygon(self.ring)

    # Testers

    def equals(self, other: "BBox") -> bool:
        return self.bbox == other.bbox

    def contains(self, point: Any) -> bool:
        """
        True if `point` lies in the box (edges included).

        `point` is a `(lon, lat[, elevation])` sequence or anything exposing
        `coordinates`, such as a Point geometry.
        """
        coords = getattr(point, "coordinates", point)
        lon, lat = float(coords[0]), float(coords[1])
        if lat < self.lat1 or lat > self.lat2:
            return False

        if self.inverted:
            return not (self.lon2 < lon < self.lon1)
        return self.lon1 <= lon <= self.lon2

    def overlaps(self, other: "BBox") -> bool:
        if self.lat1 > other.lat2 or self.lat2 < other.lat1:
            return False

        base_ranges = denormalize(self.lon1, self.lon2)
        other_ranges = denormalize(other.lon1, other.lon2)
        return any(
            intersect_ranges(base, rng) is not None
            for base in base_ranges
            for rng in other_ranges
        )

    # Operations

    def intersect(self, other: "BBox") -> list["BBox"]:
        """
        Intersection with `other`, taking into account that either may wrap.

        Returns zero, one or two disjoint bboxes. Two results happen when a box
        wrapping the date line meets the other box on both sides of the seam.
        """
        lat1 = max(self.lat1, other.lat1)
        lat2 = min(self.lat2, other.lat2)
        if lat1 > lat2:
            return []

        base_ranges = denormalize(self.lon1, self.lon2)
        other_ranges = denormalize(other.lon1, other.lon2)

        ranges: list[tuple[float, float]] = []
        for base in base_ranges:
            for rng in other_ranges:
                hit = intersect_ranges(base, rng)
                if hit is None:
                    continue
                # Two wrapping inputs yield the same range from several copies.
                normalized = normalize(*hit)
                if normalized not in ranges:
                    ranges.append(normalized)

        return [BBox(lon1, lat1, lon2, lat2) for lon1, lon2 in ranges]

    # Conversions

    def to_array(self) -> list[float]:
        return list(self.bbox)

    def format(self, decimals: int | None = None) -> str:
        d = default_decimals() if decimals is None else int(decimals)
        return (
            f"[({self.lon1:.{d}f},{self.lat1:.{d}f}) -> "
            f"({self.lon2:.{d}f},{self.lat2:.{d}f})]"
        )

    def __str__(self) -> str:
        return self.format()


BBoxLike = Union[BBox, Sequence[float]]


def ensure_bbox_2d(values: Sequence[float]) -> tuple[float, float, float, float]:
    vals = list(values)
    if len(vals) == 4:
        return (vals[0], vals[1], vals[2], vals[3])
    if len(vals) == 6:
        return (vals[0], vals[1], vals[3], vals[4])
    raise ValidationError(
        Violation.bad_arity,
        f"Invalid bbox: expected 4 or 6 values, got {len(vals)}",
    )


def _find_violation(
    lon1: float, lat1: float, lon2: float, lat2: float
) -> Violation | None:
    if lat1 > lat2:
        return Violation.lat_inverted

    # Written as negated bounds so that NaN fails too.
    checks = [
        (lat1, -90.0, 90.0, Violation.lat1_below, Violation.lat1_above),
        (lat2, -90.0, 90.0, Violation.lat2_below, Violation.lat2_above),
        (lon1, -180.0, 180.0, Violation.lon1_below, Violation.lon1_above),
        (lon2, -180.0, 180.0, Violation.lon2_below, Violation.lon2_above),
    ]
    for value, lo, hi, below, above in checks:
        if not value >= lo:
            return below
        if not value <= hi:
            return above
    return None
