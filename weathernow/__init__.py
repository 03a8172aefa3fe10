"""Current-conditions lookup for US places backed by Nominatim and the NWS API."""
from __future__ import annotations

from .compass import wind_direction_to_cardinal
from .normalizers import normalize_observation, normalize_point
from .timefmt import format_local_date, format_local_time
from .units import celsius_to_fahrenheit

__all__ = [
    "celsius_to_fahrenheit",
    "format_local_time",
    "format_local_date",
    "wind_direction_to_cardinal",
    "normalize_observation",
    "normalize_point",
]
