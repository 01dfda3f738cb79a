from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterable, Iterator

from geobox.bbox import BBox
from geofeatures.feature import Feature
from geofeatures.schemas import parse_feature_collection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeatureCollection:
    features: tuple[Feature, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", tuple(self.features))

    @classmethod
    def from_geojson(
        cls, collection: "FeatureCollection | dict[str, Any]"
    ) -> "FeatureCollection":
        if isinstance(collection, FeatureCollection):
            return collection
        model = parse_feature_collection(collection)
        logger.debug("parsed feature collection with %d features", len(model.features))
        return cls(tuple(Feature.from_model(f) for f in model.features))

    @classmethod
    def empty(cls) -> "FeatureCollection":
        return cls(())

    @classmethod
    def of(cls, features: Iterable["Feature | dict[str, Any]"]) -> "FeatureCollection":
        return cls(tuple(Feature.from_geojson(f) for f in features))

    @property
    def size(self) -> int:
        return len(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    @property
    def bbox(self) -> BBox | None:
        """Extent of all feature geometries, or None for an empty collection."""
        if not self.features:
            return None
        return BBox.around(*(f.geometry for f in self.features))

    @cached_property
    def geojson(self) -> dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [f.geojson for f in self.features],
        }
