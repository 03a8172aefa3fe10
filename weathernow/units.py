from __future__ import annotations

import math
from typing import Optional


def celsius_to_fahrenheit(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return value * 9 / 5 + 32


def fahrenheit_to_celsius(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return (value - 32) * 5 / 9


def is_fahrenheit(unit_code: Optional[str]) -> bool:
    """Guess whether a WMO unit code (``wmoUnit:degF``) denotes Fahrenheit.

    Any code containing an ``f`` matches, so an unrelated unit with an
    incidental ``f`` would be misread as Fahrenheit.
    """
    return "f" in (unit_code or "").lower()


def round_half_up(value: float) -> int:
    # round() is banker's rounding; displays expect 2.5 -> 3
    return math.floor(value + 0.5)


__all__ = ["celsius_to_fahrenheit", "fahrenheit_to_celsius", "is_fahrenheit", "round_half_up"]
