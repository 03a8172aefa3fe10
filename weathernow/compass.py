from __future__ import annotations

import math
from numbers import Real
from typing import Optional

from .units import round_half_up

CARDINALS = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)
SECTOR_DEGREES = 360 / len(CARDINALS)


def wind_direction_to_cardinal(degrees: Optional[float]) -> Optional[str]:
    """Map a bearing in degrees onto one of the 16 compass points."""
    if degrees is None or isinstance(degrees, bool) or not isinstance(degrees, Real):
        return None
    if not math.isfinite(degrees):
        return None
    normalized = ((degrees % 360) + 360) % 360
    index = round_half_up(normalized / SECTOR_DEGREES) % len(CARDINALS)
    return CARDINALS[index]


__all__ = ["CARDINALS", "wind_direction_to_cardinal"]
