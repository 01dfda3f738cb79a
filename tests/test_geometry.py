from __future__ import annotations

import pydantic
import pytest

from geobox import BBox
from geofeatures import Geometry, ensure_2d, ensure_3d


RING = [[0.0, 0.0], [4.0, 0.0], [4.0, 2.0], [0.0, 2.0], [0.0, 0.0]]
RING_3D = [[x, y, 10.0] for x, y in RING]


def test_point_constructors():
    p = Geometry.point(1, 2)
    assert p.type == "Point"
    assert p.coordinates == [1.0, 2.0]
    assert p.flat is True
    assert p.is_point()

    p3 = Geometry.point_3d(1, 2, 3)
    assert p3.coordinates == [1.0, 2.0, 3.0]
    assert p3.flat is False


def test_polygon_constructors():
    poly = Geometry.polygon([RING_3D])
    assert poly.coordinates == [RING]
    assert poly.is_polygon()

    poly3 = Geometry.polygon_3d([RING])
    assert poly3.coordinates == [[[x, y, 0.0] for x, y in RING]]


def test_is_geometry():
    p = Geometry.point(0, 0)
    assert Geometry.is_geometry(p)
    assert Geometry.is_geometry(p, "Point")
    assert not Geometry.is_geometry(p, "Polygon")
    assert not Geometry.is_geometry({"type": "Point", "coordinates": [0, 0]})


def test_from_geojson_flattens_by_default(monkeypatch):
    monkeypatch.delenv("GEOBOX_FLAT_GEOMETRIES", raising=False)
    g = Geometry.from_geojson({"type": "Polygon", "coordinates": [RING_3D]})
    assert g.flat is True
    assert g.coordinates == [RING]

    kept = Geometry.from_geojson({"type": "Polygon", "coordinates": [RING_3D]}, flat=False)
    assert kept.coordinates == [RING_3D]


def test_from_geojson_flat_default_follows_config(monkeypatch):
    monkeypatch.setenv("GEOBOX_FLAT_GEOMETRIES", "off")
    g = Geometry.from_geojson({"type": "Point", "coordinates": [1, 2, 3]})
    assert g.flat is False
    assert g.coordinates == [1.0, 2.0, 3.0]


def test_from_geojson_returns_geometries_unchanged():
    p = Geometry.point(1, 2)
    assert Geometry.from_geojson(p) is p


def test_from_geojson_rejects_unsupported_or_malformed_input():
    with pytest.raises(pydantic.ValidationError):
        Geometry.from_geojson({"type": "GeometryCollection", "geometries": []})
    with pytest.raises(pydantic.ValidationError):
        Geometry.from_geojson({"type": "Point", "coordinates": [1]})
    with pytest.raises(pydantic.ValidationError):
        Geometry.from_geojson({"type": "Polygon", "coordinates": [[[0, 0], [1, 1]]]})


def test_center_and_centroid():
    # L-shaped polygon: extent center and centroid differ.
    l_shape = Geometry.polygon(
        [[[0, 0], [4, 0], [4, 1], [1, 1], [1, 4], [0, 4], [0, 0]]]
    )
    assert l_shape.center.coordinates == [2.0, 2.0]

    cx, cy = l_shape.centroid.coordinates
    assert cx == pytest.approx(cy)
    assert cx < 2.0


def test_bbox():
    g = Geometry.polygon([RING])
    assert g.bbox == BBox(0, 0, 4, 2)
    assert Geometry.point(3, 4).bbox == BBox(3, 4, 3, 4)


def test_equals_is_topological():
    a = Geometry.polygon([RING])
    # Same square, different starting vertex.
    b = Geometry.polygon([[[4, 0], [4, 2], [0, 2], [0, 0], [4, 0]]])
    assert a.equals(b)
    assert a.equals({"type": "Polygon", "coordinates": [RING_3D]})
    assert not a.equals(Geometry.polygon([[[0, 0], [1, 0], [1, 1], [0, 0]]]))


def test_geo_interface():
    g = Geometry.point(1, 2)
    assert g.__geo_interface__ == {"type": "Point", "coordinates": [1.0, 2.0]}
    assert g.geojson == g.__geo_interface__


def test_ensure_2d_and_3d():
    multi = {"type": "MultiPolygon", "coordinates": [[RING_3D], [RING_3D]]}
    assert ensure_2d(multi)["coordinates"] == [[RING], [RING]]
    assert ensure_3d({"type": "Point", "coordinates": [1, 2]})["coordinates"] == [1.0, 2.0, 0.0]
    assert ensure_3d({"type": "Point", "coordinates": [1, 2, 5]})["coordinates"] == [1.0, 2.0, 5.0]
    # Input is left untouched.
    assert multi["coordinates"][0][0][0] == [0.0, 0.0, 10.0]


def test_geometries_compare_by_value_but_are_unhashable():
    assert Geometry.point(1, 2) == Geometry.point(1, 2)
    with pytest.raises(TypeError):
        hash(Geometry.point(1, 2))
