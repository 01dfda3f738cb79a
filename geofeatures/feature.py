from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any

from geobox.bbox import BBox
from geofeatures.geometry import Geometry
from geofeatures.schemas import FeatureModel, parse_feature


@dataclass(frozen=True)
class Feature:
    geometry: Geometry
    properties: dict[str, Any] | None = None
    id: str | int | None = None
    # Explicit GeoJSON `bbox` member; not derived from the geometry.
    bbox: BBox | None = None

    # Properties are a mutable mapping.
    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_geojson(cls, feature: "Feature | dict[str, Any]") -> "Feature":
        if isinstance(feature, Feature):
            return feature
        return cls.from_model(parse_feature(feature))

    @classmethod
    def from_model(cls, model: FeatureModel) -> "Feature":
        return cls(
            geometry=Geometry.from_model(model.geometry),
            properties=model.properties,
            id=model.id,
            bbox=BBox.from_array(model.bbox) if model.bbox is not None else None,
        )

    @property
    def type(self) -> str:
        return self.geometry.type

    @property
    def coordinates(self) -> Any:
        return self.geometry.coordinates

    def is_point(self) -> bool:
        return self.geometry.is_point()

    def is_line(self) -> bool:
        return self.geometry.is_line()

    def is_polygon(self) -> bool:
        return self.geometry.is_polygon()

    def is_multipolygon(self) -> bool:
        return self.geometry.is_multipolygon()

    @cached_property
    def geojson(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "type": "Feature",
            "geometry": self.geometry.geojson,
            "properties": self.properties,
        }
        if self.id is not None:
            out["id"] = self.id
        if self.bbox is not None:
            out["bbox"] = self.bbox.to_array()
        return out
