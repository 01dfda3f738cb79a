from __future__ import annotations

import os


def default_decimals() -> int:
    raw = (os.getenv("GEOBOX_BBOX_DECIMALS") or "").strip()
    if raw:
        try:
            return max(0, int(raw))
        except Exception:
            pass
    return 2


def flat_geometries() -> bool:
    v = (os.getenv("GEOBOX_FLAT_GEOMETRIES") or "1").strip().lower()
    return v not in {"0", "false", "no", "off"}
