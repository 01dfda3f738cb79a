"""
Longitude interval arithmetic across the date line.

A longitude range `(lon1, lon2)` with `lon1 > lon2` wraps around the antimeridian. To
compare such ranges we lift them onto an unbounded ("extended") number line as one or
two ordinary ranges, do plain interval math there, then fold the results back into
[-180, 180].
"""

from __future__ import annotations

LonRange = tuple[float, float]


def denormalize(lon1: float, lon2: float) -> list[LonRange]:
    """
    Lift a (possibly inverted) range onto the extended line.

    Examples:
    - (-180, 180) -> [(-180, 180)]
    - (-160, 160) -> [(-160, 160)]
    - (-180, -160) -> [(180, 180), (180, 200)]
    - (160, 180) -> [(-20, 0), (160, 180)]
    - (160, -160) -> [(-200, -160), (160, 200)]
    """
    if lon1 == -180 and lon2 == 180:
        return [(lon1, lon2)]

    if lon1 == -180:
        return [(180.0, 180.0), (lon1 + 360, lon2 + 360)]

    if lon2 == 180:
        return [(lon1 - 180, lon2 - 180), (lon1, lon2)]

    if lon1 <= lon2:
        return [(lon1, lon2)]
    return [(lon1 - 360, lon2), (lon1, lon2 + 360)]


def normalize_lon(lon: float) -> float:
    while lon < -180:
        lon += 360
    while lon > 180:
        lon -= 360
    return lon


def normalize(lon1: float, lon2: float) -> LonRange:
    """
    Fold an extended range back into [-180, 180].

    Endpoints are folded independently, so the result may be inverted again.
    """
    return (normalize_lon(lon1), normalize_lon(lon2))


def intersect_ranges(left: LonRange, right: LonRange) -> LonRange | None:
    # Closed intervals: touching endpoints intersect in a single point.
    lo = max(left[0], right[0])
    hi = min(left[1], right[1])
    if lo > hi:
        return None
    return (lo, hi)
