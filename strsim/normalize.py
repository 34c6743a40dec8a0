"""Map raw metric output onto a common ``[0, 1]`` similarity scale.

The formula is chosen by the entry's ``(polarity, native_range)`` pair alone:

=========== ==================== =====================================
polarity    native range         normalized value
=========== ==================== =====================================
similarity  unit interval        ``value``
similarity  signed unit interval ``(value + 1) / 2``
distance    unit interval        ``1 - value``
distance    unbounded            ``1 - value / max(len(a), len(b), 1)``
=========== ==================== =====================================

``1`` always means identical and ``0`` maximally different.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from .catalog import AlgorithmEntry, NativeRange, Polarity
from .errors import InvalidCatalogError
from .metrics import Number

logger = logging.getLogger(__name__)

_Rule = Callable[[float, str, str], float]


def _similarity_unit(value: float, a: str, b: str) -> float:
    return value


def _similarity_signed(value: float, a: str, b: str) -> float:
    return (value + 1.0) / 2.0


def _distance_unit(value: float, a: str, b: str) -> float:
    return 1.0 - value


def _distance_unbounded(value: float, a: str, b: str) -> float:
    # both strings empty: value is 0 and the result is 1
    return 1.0 - value / max(len(a), len(b), 1)


NORMALIZATION_RULES: Dict[Tuple[Polarity, NativeRange], _Rule] = {
    (Polarity.SIMILARITY, NativeRange.UNIT_INTERVAL): _similarity_unit,
    (Polarity.SIMILARITY, NativeRange.SIGNED_UNIT_INTERVAL): _similarity_signed,
    (Polarity.DISTANCE, NativeRange.UNIT_INTERVAL): _distance_unit,
    (Polarity.DISTANCE, NativeRange.UNBOUNDED): _distance_unbounded,
}


def clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, value))


def normalize(value: Number, entry: AlgorithmEntry, a: str, b: str) -> float:
    """Return ``value`` on the ``[0, 1]`` similarity scale for ``entry``."""

    rule = NORMALIZATION_RULES.get(entry.classification)
    if rule is None:
        raise InvalidCatalogError(
            f"No normalization rule for {entry.polarity.value}/{entry.native_range.value}"
        )
    scaled = rule(float(value), a, b)
    clamped = clamp_unit(scaled)
    if clamped != scaled:
        logger.debug(
            "%s: normalized value %r outside [0, 1], clamped to %r", entry.name, scaled, clamped
        )
    return clamped


__all__ = ["NORMALIZATION_RULES", "clamp_unit", "normalize"]
