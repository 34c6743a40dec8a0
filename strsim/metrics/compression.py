"""Statistical metrics based on normalized compression distance."""

from __future__ import annotations

import textdistance

from .base import unit_distance


@unit_distance
def entropy_ncd(a: str, b: str) -> float:
    """Normalized compression distance using Shannon entropy as the compressor."""

    value = float(textdistance.entropy_ncd(a, b))
    return min(max(value, 0.0), 1.0)


__all__ = ["entropy_ncd"]
