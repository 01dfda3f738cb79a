from __future__ import annotations

import math

# Latitude limit of the square Web Mercator world (the edge of tile 0/0/0).
MAX_MERCATOR_LAT = 85.0511287798066


def tile_lat(zoom: int, tile_y: int) -> float:
    # https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames
    n = 2 ** int(zoom)
    t = math.pi * (1.0 - 2.0 * int(tile_y) / n)
    return math.degrees(math.atan(math.sinh(t)))


def tile_lon(zoom: int, tile_x: int) -> float:
    n = 2 ** int(zoom)
    return int(tile_x) / n * 360.0 - 180.0


def tile_bbox(zoom: int, x: int, y: int) -> tuple[float, float, float, float]:
    """
    Slippy tile (z/x/y) bounds as a WGS84 (west, south, east, north) tuple.

    Tile rows count downwards from the north edge, so the top of row `y` is the
    bottom of row `y - 1`.
    """
    return (
        tile_lon(zoom, x),
        tile_lat(zoom, y + 1),
        tile_lon(zoom, x + 1),
        tile_lat(zoom, y),
    )
