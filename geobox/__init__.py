"""
Antimeridian-aware bounding boxes over the GeoJSON data model.

A bbox may wrap around the date line (lon1 > lon2); overlap and intersection
account for that.
"""
from .bbox import BBox, BBoxLike, ensure_bbox_2d
from .errors import GeoboxError, ValidationError, Violation
from .lon_range import denormalize, normalize

__all__ = [
    "BBox",
    "BBoxLike",
    "GeoboxError",
    "ValidationError",
    "Violation",
    "denormalize",
    "ensure_bbox_2d",
    "normalize",
]
