"""Edit-distance family metrics backed by RapidFuzz and textdistance."""

from __future__ import annotations

import textdistance
from rapidfuzz.distance import DamerauLevenshtein, Hamming, Jaro, JaroWinkler, Levenshtein

from .base import guard_empty, length_distance, similarity, unit_distance

MLIPNS = textdistance.MLIPNS(threshold=0.25, maxmismatches=2)


@length_distance
def levenshtein(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


@length_distance
def damerau_levenshtein(a: str, b: str) -> int:
    return DamerauLevenshtein.distance(a, b)


@length_distance
def hamming(a: str, b: str) -> int:
    """Position-wise mismatches, counting the length difference as mismatches."""

    return Hamming.distance(a, b, pad=True)


@similarity
def jaro(a: str, b: str) -> float:
    return float(Jaro.similarity(a, b))


@similarity
def jaro_winkler(a: str, b: str) -> float:
    return float(JaroWinkler.similarity(a, b, prefix_weight=0.1))


@similarity
def lig3(a: str, b: str) -> float:
    """LIG3 similarity: ``2I / (2I + C)``.

    ``I`` counts the positions holding the same character and ``C`` is the
    Levenshtein distance.
    """

    matches = sum(1 for x, y in zip(a, b) if x == y)
    edits = Levenshtein.distance(a, b)
    if matches == 0:
        return 0.0
    return 2 * matches / (2 * matches + edits)


@guard_empty(1, 0)
def mlipns(a: str, b: str) -> int:
    """1 when the strings are near-equal under the MLIPNS threshold, else 0."""

    return int(MLIPNS(a, b))


@unit_distance
def yujian_bo(a: str, b: str) -> float:
    """Yujian-Bo normalized Levenshtein distance in ``[0, 1]``."""

    edits = Levenshtein.distance(a, b)
    return 2 * edits / (len(a) + len(b) + edits)


__all__ = [
    "damerau_levenshtein",
    "hamming",
    "jaro",
    "jaro_winkler",
    "levenshtein",
    "lig3",
    "mlipns",
    "yujian_bo",
]
