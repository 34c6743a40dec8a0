"""Metric functions: ``f(a, b) -> int | float`` per algorithm.

Every function is total over pairs of strings. Two empty strings give the
algorithm's "identical" value and a single empty string its "maximally
different" value.
"""

from __future__ import annotations

from .base import MetricFunction, Number
from .compression import entropy_ncd
from .edit import (
    damerau_levenshtein,
    hamming,
    jaro,
    jaro_winkler,
    levenshtein,
    lig3,
    mlipns,
    yujian_bo,
)
from .sequence import (
    length,
    longest_common_subsequence,
    longest_common_substring,
    prefix,
    ratcliff_obershelp,
    smith_waterman,
    suffix,
)
from .sift4 import sift4_common, sift4_simple
from .token import bag, cosine, jaccard, overlap, roberts, sorensen_dice, tversky

__all__ = [
    "MetricFunction",
    "Number",
    "bag",
    "cosine",
    "damerau_levenshtein",
    "entropy_ncd",
    "hamming",
    "jaccard",
    "jaro",
    "jaro_winkler",
    "length",
    "levenshtein",
    "lig3",
    "longest_common_subsequence",
    "longest_common_substring",
    "mlipns",
    "overlap",
    "prefix",
    "ratcliff_obershelp",
    "roberts",
    "sift4_common",
    "sift4_simple",
    "smith_waterman",
    "sorensen_dice",
    "suffix",
    "tversky",
    "yujian_bo",
]
