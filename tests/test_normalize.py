from __future__ import annotations

import logging

import pytest

from strsim.catalog import AlgorithmEntry, Category, NativeRange, Polarity
from strsim.dispatch import compute
from strsim.normalize import NORMALIZATION_RULES, normalize

PAIRS = [
    ("nushell", "nutshell"),
    ("kitten", "sitting"),
    ("abc", "xyz"),
    ("", "abc"),
    ("same", "same"),
]


def _entry(polarity: Polarity, native_range: NativeRange) -> AlgorithmEntry:
    return AlgorithmEntry(
        name="synthetic",
        alias="syn",
        category=Category.STATISTICAL,
        polarity=polarity,
        native_range=native_range,
        function=lambda a, b: 0,
    )


def test_similarity_unit_interval_is_identity() -> None:
    entry = _entry(Polarity.SIMILARITY, NativeRange.UNIT_INTERVAL)
    assert normalize(0.42, entry, "a", "b") == pytest.approx(0.42)


def test_similarity_signed_unit_interval_is_shifted() -> None:
    entry = _entry(Polarity.SIMILARITY, NativeRange.SIGNED_UNIT_INTERVAL)
    assert normalize(-1.0, entry, "a", "b") == 0.0
    assert normalize(0.0, entry, "a", "b") == 0.5
    assert normalize(1.0, entry, "a", "b") == 1.0


def test_distance_unit_interval_is_inverted() -> None:
    entry = _entry(Polarity.DISTANCE, NativeRange.UNIT_INTERVAL)
    assert normalize(0.25, entry, "a", "b") == pytest.approx(0.75)


def test_distance_unbounded_divides_by_longest_length() -> None:
    entry = _entry(Polarity.DISTANCE, NativeRange.UNBOUNDED)
    assert normalize(1, entry, "nushell", "nutshell") == pytest.approx(0.875)
    assert normalize(0, entry, "", "") == 1.0


def test_identity_normalizes_to_one(entry: AlgorithmEntry) -> None:
    for text in ("a", "nushell", "kitten sitting", "Grüße, Zürich!"):
        assert compute(text, text, entry.name, normalize=True) == pytest.approx(1.0)


def test_both_empty_normalizes_to_one(entry: AlgorithmEntry) -> None:
    assert compute("", "", entry.alias, normalize=True) == 1.0


def test_one_empty_normalizes_to_zero(entry: AlgorithmEntry) -> None:
    assert compute("", "abc", entry.alias, normalize=True) == pytest.approx(0.0)


@pytest.mark.parametrize("a,b", PAIRS)
def test_normalized_values_in_unit_interval(entry: AlgorithmEntry, a: str, b: str) -> None:
    value = compute(a, b, entry.name, normalize=True)
    assert 0.0 <= value <= 1.0
    assert isinstance(value, float)


@pytest.mark.parametrize("a,b", PAIRS)
def test_unclamped_rule_stays_in_unit_interval(entry: AlgorithmEntry, a: str, b: str) -> None:
    rule = NORMALIZATION_RULES[entry.classification]
    scaled = rule(float(entry(a, b)), a, b)
    assert -1e-9 <= scaled <= 1.0 + 1e-9, f"{entry.name} maps {a!r}/{b!r} to {scaled!r}"


def test_out_of_range_value_is_clamped_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    entry = _entry(Polarity.DISTANCE, NativeRange.UNIT_INTERVAL)
    with caplog.at_level(logging.DEBUG, logger="strsim.normalize"):
        assert normalize(1.5, entry, "a", "b") == 0.0

    assert "clamped" in caplog.text
