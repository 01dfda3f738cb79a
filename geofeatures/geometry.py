from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Literal

from shapely.geometry.base import BaseGeometry

from geobox.bbox import BBox
from geobox.config import flat_geometries
from geobox.envelope import to_shape
from geofeatures.schemas import parse_geometry

GeometryType = Literal["Point", "LineString", "Polygon", "MultiPolygon"]

# How deeply positions are nested in `coordinates` for each geometry type.
_POSITION_DEPTH: dict[str, int] = {
    "Point": 0,
    "LineString": 1,
    "Polygon": 2,
    "MultiPolygon": 3,
}


@dataclass(frozen=True)
class Geometry:
    """
    A GeoJSON geometry (Point, LineString, Polygon or MultiPolygon).

    `raw` is the GeoJSON mapping. A `flat` geometry is guaranteed 2d; a non-flat one
    keeps whatever elevations it was given.
    """

    raw: dict[str, Any]
    flat: bool = True

    # Holds mutable GeoJSON mappings; compare with == or equals(), do not hash.
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_geojson(cls, raw: Any, flat: bool | None = None) -> "Geometry":
        if isinstance(raw, Geometry):
            return raw
        return cls.from_model(parse_geometry(raw), flat=flat)

    @classmethod
    def from_model(cls, model: Any, flat: bool | None = None) -> "Geometry":
        data = model.model_dump()
        if flat is None:
            flat = flat_geometries()
        return cls(ensure_2d(data) if flat else data, flat)

    @classmethod
    def point(cls, lon: float, lat: float) -> "Geometry":
        return cls({"type": "Point", "coordinates": [float(lon), float(lat)]}, True)

    @classmethod
    def point_3d(cls, lon: float, lat: float, elevation: float) -> "Geometry":
        return cls(
            {
                "type": "Point",
                "coordinates": [float(lon), float(lat), float(elevation)],
            },
            False,
        )

    @classmethod
    def line(cls, coordinates: list[Any]) -> "Geometry":
        return cls(ensure_2d({"type": "LineString", "coordinates": coordinates}), True)

    @classmethod
    def polygon(cls, coordinates: list[list[Any]]) -> "Geometry":
        return cls(ensure_2d({"type": "Polygon", "coordinates": coordinates}), True)

    @classmethod
    def polygon_3d(cls, coordinates: list[list[Any]]) -> "Geometry":
        return cls(ensure_3d({"type": "Polygon", "coordinates": coordinates}), False)

    @staticmethod
    def is_geometry(arg: Any, type: GeometryType | None = None) -> bool:
        if not isinstance(arg, Geometry):
            return False
        return type is None or arg.type == type

    @property
    def type(self) -> str:
        return str(self.raw["type"])

    @property
    def coordinates(self) -> Any:
        return self.raw["coordinates"]

    def is_point(self) -> bool:
        return self.type == "Point"

    def is_line(self) -> bool:
        return self.type == "LineString"

    def is_polygon(self) -> bool:
        return self.type == "Polygon"

    def is_multipolygon(self) -> bool:
        return self.type == "MultiPolygon"

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.raw

    @property
    def geojson(self) -> dict[str, Any]:
        return self.raw

    @cached_property
    def shape(self) -> BaseGeometry:
        return to_shape(self.raw)

    @property
    def center(self) -> "Geometry":
        """Center of the geometry's extent (not its centroid)."""
        minx, miny, maxx, maxy = self.shape.bounds
        return Geometry.point((minx + maxx) / 2.0, (miny + maxy) / 2.0)

    @property
    def centroid(self) -> "Geometry":
        c = self.shape.centroid
        return Geometry.point(c.x, c.y)

    @property
    def bbox(self) -> BBox:
        return BBox.around(self)

    def equals(self, other: "Geometry | dict[str, Any]") -> bool:
        """
        Topological equality. `other` is coerced to this geometry's dimensionality
        first.
        """
        coerce = ensure_2d if self.flat else ensure_3d
        other_raw = other.raw if isinstance(other, Geometry) else other
        return bool(self.shape.equals(to_shape(coerce(other_raw))))


def ensure_2d(raw: dict[str, Any]) -> dict[str, Any]:
    return _map_positions(raw, lambda p: [float(p[0]), float(p[1])])


def ensure_3d(raw: dict[str, Any]) -> dict[str, Any]:
    # Missing elevations become 0.
    return _map_positions(
        raw,
        lambda p: [float(p[0]), float(p[1]), float(p[2]) if len(p) > 2 else 0.0],
    )


def _map_positions(
    raw: dict[str, Any], fn: Callable[[Any], list[float]]
) -> dict[str, Any]:
    depth = _POSITION_DEPTH.get(str(raw.get("type")))
    if depth is None:
        return raw

    def walk(coords: Any, level: int) -> Any:
        if level == 0:
            return fn(coords)
        return [walk(c, level - 1) for c in coords]

    return {**raw, "coordinates": walk(raw["coordinates"], depth)}
