"""Sequence-alignment and length-based metrics.

The length-count similarities here (common subsequence, common substring,
prefix, suffix, local alignment score) are exposed in their distance form,
``max(len(a), len(b)) - similarity``.
"""

from __future__ import annotations

import textdistance
from rapidfuzz.distance import LCSseq, Postfix, Prefix

from .base import as_distance, length_distance, similarity

SMITH_WATERMAN_MATCH = 1
SMITH_WATERMAN_MISMATCH = -1
SMITH_WATERMAN_GAP = -1


@length_distance
def longest_common_subsequence(a: str, b: str) -> int:
    return as_distance(LCSseq.similarity(a, b), a, b)


@length_distance
def longest_common_substring(a: str, b: str) -> int:
    return as_distance(len(textdistance.lcsstr(a, b)), a, b)


@length_distance
def length(a: str, b: str) -> int:
    return int(textdistance.length(a, b))


@length_distance
def prefix(a: str, b: str) -> int:
    return as_distance(Prefix.similarity(a, b), a, b)


@length_distance
def suffix(a: str, b: str) -> int:
    return as_distance(Postfix.similarity(a, b), a, b)


@similarity
def ratcliff_obershelp(a: str, b: str) -> float:
    return float(textdistance.ratcliff_obershelp(a, b))


def smith_waterman_score(a: str, b: str) -> int:
    """Best local alignment score between ``a`` and ``b``."""

    best = 0
    previous = [0] * (len(b) + 1)
    for ca in a:
        current = [0] * (len(b) + 1)
        for j, cb in enumerate(b, start=1):
            weight = SMITH_WATERMAN_MATCH if ca == cb else SMITH_WATERMAN_MISMATCH
            current[j] = max(
                0,
                previous[j - 1] + weight,
                previous[j] + SMITH_WATERMAN_GAP,
                current[j - 1] + SMITH_WATERMAN_GAP,
            )
            if current[j] > best:
                best = current[j]
        previous = current
    return best


@length_distance
def smith_waterman(a: str, b: str) -> int:
    return as_distance(smith_waterman_score(a, b), a, b)


__all__ = [
    "length",
    "longest_common_subsequence",
    "longest_common_substring",
    "prefix",
    "ratcliff_obershelp",
    "smith_waterman",
    "smith_waterman_score",
    "suffix",
]
