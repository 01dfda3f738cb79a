from __future__ import annotations

from geobox.lon_range import denormalize, intersect_ranges, normalize, normalize_lon


def test_world_range_is_not_split():
    assert denormalize(-180, 180) == [(-180, 180)]


def test_plain_range_is_returned_as_is():
    assert denormalize(-160, 160) == [(-160, 160)]
    assert denormalize(10, 10) == [(10, 10)]


def test_range_starting_at_the_seam_is_shifted_east():
    assert denormalize(-180, -160) == [(180, 180), (180, 200)]


def test_range_ending_at_the_seam_keeps_itself_last():
    assert denormalize(160, 180) == [(-20, 0), (160, 180)]


def test_inverted_range_is_expressed_on_both_sides():
    assert denormalize(160, -160) == [(-200, -160), (160, 200)]
    assert denormalize(90, -90) == [(-270, -90), (90, 270)]


def test_normalize_folds_each_endpoint_independently():
    assert normalize(-200, -160) == (160, -160)
    assert normalize(160, 200) == (160, -160)
    assert normalize(180, 190) == (180, -170)
    assert normalize(-540, 540) == (-180, 180)


def test_normalize_keeps_canonical_bounds():
    assert normalize(-180, 180) == (-180, 180)
    assert normalize_lon(180) == 180
    assert normalize_lon(-180) == -180
    assert normalize_lon(450) == 90


def test_intersect_ranges_uses_closed_endpoints():
    assert intersect_ranges((0, 10), (10, 20)) == (10, 10)
    assert intersect_ranges((0, 10), (5, 20)) == (5, 10)
    assert intersect_ranges((0, 10), (11, 20)) is None
    assert intersect_ranges((-200, -160), (-210, -150)) == (-200, -160)
