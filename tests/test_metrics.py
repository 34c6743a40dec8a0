from __future__ import annotations

import pytest

from strsim import metrics
from strsim.catalog import AlgorithmEntry, NativeRange, Polarity
from strsim.metrics.sequence import smith_waterman_score
from strsim.metrics.sift4 import sift4_common_distance, sift4_simple_distance

PAIRS = [
    ("nushell", "nutshell"),
    ("kitten", "sitting"),
    ("abc", "xyz"),
    ("a", "aaaaaaaa"),
    ("Grüße, Zürich!", "grusse zurich"),
    ("abcdef", "badcfe"),
]


def _within_native_range(entry: AlgorithmEntry, value, a: str, b: str) -> bool:
    if entry.native_range is NativeRange.UNBOUNDED:
        return 0 <= value <= max(len(a), len(b))
    if entry.native_range is NativeRange.UNIT_INTERVAL:
        return 0.0 <= value <= 1.0
    return -1.0 <= value <= 1.0


@pytest.mark.parametrize("a,b", PAIRS)
def test_raw_values_stay_in_native_range(entry: AlgorithmEntry, a: str, b: str) -> None:
    assert _within_native_range(entry, entry(a, b), a, b)
    assert _within_native_range(entry, entry(b, a), b, a)


def test_both_empty_is_identical(entry: AlgorithmEntry) -> None:
    expected = 0 if entry.polarity is Polarity.DISTANCE else 1
    assert entry("", "") == expected


@pytest.mark.parametrize("a,b", [("", "abc"), ("abcd", "")])
def test_one_empty_is_maximally_different(entry: AlgorithmEntry, a: str, b: str) -> None:
    value = entry(a, b)
    if entry.polarity is Polarity.SIMILARITY:
        assert value == 0
    elif entry.native_range is NativeRange.UNBOUNDED:
        assert value == max(len(a), len(b))
    else:
        assert value == pytest.approx(1.0)


def test_metrics_are_deterministic(entry: AlgorithmEntry) -> None:
    assert entry("nushell", "nutshell") == entry("nushell", "nutshell")


@pytest.mark.parametrize(
    "func,expected",
    [
        (metrics.levenshtein, 1),
        (metrics.damerau_levenshtein, 1),
        (metrics.hamming, 5),
        (metrics.bag, 1),
        (metrics.length, 1),
        (metrics.prefix, 6),
        (metrics.suffix, 3),
        (metrics.longest_common_subsequence, 1),
        (metrics.longest_common_substring, 3),
        (metrics.smith_waterman, 2),
        (metrics.sift4_simple, 1),
        (metrics.sift4_common, 1),
        (metrics.mlipns, 0),
    ],
)
def test_integer_metrics_on_nushell_nutshell(func, expected: int) -> None:
    value = func("nushell", "nutshell")
    assert value == expected
    assert isinstance(value, int)


@pytest.mark.parametrize(
    "func,expected",
    [
        (metrics.jaccard, 7 / 8),
        (metrics.tversky, 7 / 8),
        (metrics.overlap, 1.0),
        (metrics.sorensen_dice, 14 / 15),
        (metrics.cosine, 7 / 56**0.5),
        (metrics.roberts, 14 / 15),
        (metrics.ratcliff_obershelp, 14 / 15),
        (metrics.lig3, 6 / 7),
        (metrics.yujian_bo, 2 / 16),
    ],
)
def test_float_metrics_on_nushell_nutshell(func, expected: float) -> None:
    assert func("nushell", "nutshell") == pytest.approx(expected)


def test_hamming_pads_unequal_lengths() -> None:
    assert metrics.hamming("abc", "abc") == 0
    assert metrics.hamming("abc", "abcde") == 2
    assert metrics.hamming("abc", "xbcde") == 3


def test_jaro_winkler_rewards_common_prefix() -> None:
    jaro = metrics.jaro("nushell", "nutshell")
    assert 0.9 < jaro < 1.0
    assert metrics.jaro_winkler("nushell", "nutshell") >= jaro


def test_mlipns_accepts_near_equal_strings() -> None:
    assert metrics.mlipns("abcdefgh", "abcdefgx") == 1
    assert metrics.mlipns("abcdef", "uvwxyz") == 0


def test_entropy_ncd_identical_is_zero() -> None:
    assert metrics.entropy_ncd("banana", "banana") == pytest.approx(0.0)
    assert 0.0 < metrics.entropy_ncd("aaaa", "bbbb") <= 1.0


def test_smith_waterman_score_uses_best_local_alignment() -> None:
    assert smith_waterman_score("nushell", "nutshell") == 6
    assert smith_waterman_score("xxabcxx", "yyabcyy") == 3
    assert smith_waterman_score("abc", "xyz") == 0


def test_sift4_counts_transpositions_only_in_common_variant() -> None:
    assert sift4_simple_distance("abcd", "abcd") == 0
    assert sift4_common_distance("abcd", "abcd") == 0
    assert sift4_simple_distance("", "abc") == 3
    assert sift4_common_distance("abc", "") == 3
    assert sift4_simple_distance("abcdefgh", "abcxefgh") == 1
