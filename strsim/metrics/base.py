"""Shared helpers for metric functions."""

from __future__ import annotations

import functools
from typing import Callable, Union

Number = Union[int, float]
MetricFunction = Callable[[str, str], Number]


def longest_length(a: str, b: str) -> int:
    return max(len(a), len(b))


def guard_empty(
    identical: Number,
    different: Union[Number, MetricFunction],
) -> Callable[[MetricFunction], MetricFunction]:
    """Short-circuit the empty-string cases before calling the wrapped metric.

    Both strings empty return ``identical``. Exactly one empty string returns
    ``different``, which may be a constant or a callable receiving ``(a, b)``.
    """

    def decorator(func: MetricFunction) -> MetricFunction:
        @functools.wraps(func)
        def wrapper(a: str, b: str) -> Number:
            if not a and not b:
                return identical
            if not a or not b:
                return different(a, b) if callable(different) else different
            return func(a, b)

        return wrapper

    return decorator


similarity = guard_empty(1.0, 0.0)
unit_distance = guard_empty(0.0, 1.0)
length_distance = guard_empty(0, longest_length)


def as_distance(similarity_len: int, a: str, b: str) -> int:
    """Turn a length-count similarity into ``max(len) - similarity``."""

    return longest_length(a, b) - similarity_len


__all__ = [
    "MetricFunction",
    "Number",
    "as_distance",
    "guard_empty",
    "length_distance",
    "longest_length",
    "similarity",
    "unit_distance",
]
