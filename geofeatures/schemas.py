"""
Wire schemas for GeoJSON input.

Raw mappings coming from JSON are validated here before they become `Geometry` /
`Feature` / `FeatureCollection` values. Only the geometry types the feature layer
supports are accepted.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# [lon, lat] or [lon, lat, elevation]
Position = Annotated[list[float], Field(min_length=2, max_length=3)]
LinearRing = Annotated[list[Position], Field(min_length=4)]


class PointModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["Point"]
    coordinates: Position


class LineStringModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["LineString"]
    coordinates: Annotated[list[Position], Field(min_length=2)]


class PolygonModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["Polygon"]
    coordinates: list[LinearRing]


class MultiPolygonModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["MultiPolygon"]
    coordinates: list[list[LinearRing]]


GeometryModel = Annotated[
    Union[PointModel, LineStringModel, PolygonModel, MultiPolygonModel],
    Field(discriminator="type"),
]


class FeatureModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["Feature"]
    geometry: GeometryModel
    properties: dict[str, Any] | None = None
    id: str | int | None = None
    # 4 (2d) or 6 (3d) numbers; arity and ranges are checked by BBox.
    bbox: list[float] | None = None


class FeatureCollectionModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["FeatureCollection"]
    features: list[FeatureModel]


_geometry_adapter: TypeAdapter = TypeAdapter(GeometryModel)


def parse_geometry(raw: Any) -> Union[PointModel, LineStringModel, PolygonModel, MultiPolygonModel]:
    return _geometry_adapter.validate_python(raw)


def parse_feature(raw: Any) -> FeatureModel:
    return FeatureModel.model_validate(raw)


def parse_feature_collection(raw: Any) -> FeatureCollectionModel:
    return FeatureCollectionModel.model_validate(raw)
