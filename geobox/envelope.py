from __future__ import annotations

import logging
from typing import Any, Iterable

from shapely.geometry import GeometryCollection, shape
from shapely.geometry.base import BaseGeometry

logger = logging.getLogger(__name__)


def to_shape(geometry: Any) -> BaseGeometry:
    """
    Coerce a GeoJSON mapping, a `__geo_interface__` object or a shapely geometry
    into a shapely geometry.
    """
    if isinstance(geometry, BaseGeometry):
        return geometry
    return shape(geometry)


def envelope(geometries: Iterable[Any]) -> tuple[float, float, float, float]:
    """
    Minimal axis-aligned (lon1, lat1, lon2, lat2) box around all `geometries`.

    Elevations are ignored. The result never wraps around the date line; callers
    spanning the antimeridian must pass their own extent.
    """
    shapes = [to_shape(g) for g in geometries]
    if not shapes:
        raise ValueError("envelope() requires at least one geometry")

    minx, miny, maxx, maxy = GeometryCollection(shapes).bounds
    logger.debug(
        "envelope of %d geometries: (%s, %s, %s, %s)", len(shapes), minx, miny, maxx, maxy
    )
    return (float(minx), float(miny), float(maxx), float(maxy))
