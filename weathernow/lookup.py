from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Optional


def dig(payload: Any, *path: str, default: Any = None) -> Any:
    """Walk ``path`` through nested mappings without raising.

    Returns ``default`` as soon as a link is missing, ``None`` or not a
    mapping.
    """
    current = payload
    for key in path:
        if not isinstance(current, Mapping):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def safe_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


__all__ = ["dig", "safe_float"]
