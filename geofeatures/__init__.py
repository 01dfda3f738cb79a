"""
Thin GeoJSON geometry / feature / feature collection values.

Extents are computed through `geobox.BBox`.
"""
from .collection import FeatureCollection
from .feature import Feature
from .geometry import Geometry, ensure_2d, ensure_3d

__all__ = [
    "Feature",
    "FeatureCollection",
    "Geometry",
    "ensure_2d",
    "ensure_3d",
]
