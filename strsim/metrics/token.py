"""Token-set metrics over character multisets."""

from __future__ import annotations

from collections import Counter

import textdistance

from .base import length_distance, similarity


@length_distance
def bag(a: str, b: str) -> int:
    return int(textdistance.bag(a, b))


@similarity
def cosine(a: str, b: str) -> float:
    return float(textdistance.cosine(a, b))


@similarity
def jaccard(a: str, b: str) -> float:
    return float(textdistance.jaccard(a, b))


@similarity
def overlap(a: str, b: str) -> float:
    return float(textdistance.overlap(a, b))


@similarity
def sorensen_dice(a: str, b: str) -> float:
    return float(textdistance.sorensen_dice(a, b))


@similarity
def tversky(a: str, b: str) -> float:
    return float(textdistance.tversky(a, b))


@similarity
def roberts(a: str, b: str) -> float:
    """Roberts similarity: shared counts weighted by their min/max ratio."""

    counts_a = Counter(a)
    counts_b = Counter(b)
    total = sum((counts_a + counts_b).values())
    shared = 0.0
    for char in counts_a.keys() & counts_b.keys():
        x, y = counts_a[char], counts_b[char]
        shared += (x + y) * min(x, y) / max(x, y)
    return shared / total


__all__ = [
    "bag",
    "cosine",
    "jaccard",
    "overlap",
    "roberts",
    "sorensen_dice",
    "tversky",
]
