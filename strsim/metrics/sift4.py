"""Sift4 approximate edit distances (simple and common variants)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .base import length_distance

DEFAULT_MAX_OFFSET = 5


@dataclass
class _Offset:
    c1: int
    c2: int
    trans: bool


def sift4_simple_distance(a: str, b: str, max_offset: int = DEFAULT_MAX_OFFSET) -> int:
    if not a:
        return len(b)
    if not b:
        return len(a)

    l1, l2 = len(a), len(b)
    c1 = c2 = 0
    lcss = 0
    local_cs = 0
    while c1 < l1 and c2 < l2:
        if a[c1] == b[c2]:
            local_cs += 1
        else:
            lcss += local_cs
            local_cs = 0
            if c1 != c2:
                c1 = c2 = max(c1, c2)
            for i in range(max_offset):
                if not (c1 + i < l1 or c2 + i < l2):
                    break
                if c1 + i < l1 and c2 < l2 and a[c1 + i] == b[c2]:
                    c1 += i
                    local_cs += 1
                    break
                if c2 + i < l2 and c1 < l1 and a[c1] == b[c2 + i]:
                    c2 += i
                    local_cs += 1
                    break
        c1 += 1
        c2 += 1
    lcss += local_cs
    return max(l1, l2) - lcss


def sift4_common_distance(a: str, b: str, max_offset: int = DEFAULT_MAX_OFFSET) -> int:
    """Sift4 with transposition tracking."""

    if not a:
        return len(b)
    if not b:
        return len(a)

    l1, l2 = len(a), len(b)
    c1 = c2 = 0
    lcss = 0
    local_cs = 0
    trans = 0
    offsets: List[_Offset] = []
    while c1 < l1 and c2 < l2:
        if a[c1] == b[c2]:
            local_cs += 1
            is_trans = False
            i = 0
            while i < len(offsets):
                ofs = offsets[i]
                if c1 <= ofs.c1 or c2 <= ofs.c2:
                    is_trans = abs(c2 - c1) >= abs(ofs.c2 - ofs.c1)
                    if is_trans:
                        trans += 1
                    elif not ofs.trans:
                        ofs.trans = True
                        trans += 1
                    break
                if c1 > ofs.c2 and c2 > ofs.c1:
                    del offsets[i]
                else:
                    i += 1
            offsets.append(_Offset(c1, c2, is_trans))
        else:
            lcss += local_cs
            local_cs = 0
            if c1 != c2:
                c1 = c2 = min(c1, c2)
            for i in range(max_offset):
                if not (c1 + i < l1 or c2 + i < l2):
                    break
                if c1 + i < l1 and a[c1 + i] == b[c2]:
                    c1 += i - 1
                    c2 -= 1
                    break
                if c2 + i < l2 and a[c1] == b[c2 + i]:
                    c1 -= 1
                    c2 += i - 1
                    break
        c1 += 1
        c2 += 1
        if c1 >= l1 or c2 >= l2:
            lcss += local_cs
            local_cs = 0
            c1 = c2 = min(c1, c2)
    lcss += local_cs
    longest = max(l1, l2)
    # clamp into [0, max(len)]
    return min(max(longest - lcss + trans, 0), longest)


@length_distance
def sift4_simple(a: str, b: str) -> int:
    return sift4_simple_distance(a, b)


@length_distance
def sift4_common(a: str, b: str) -> int:
    return sift4_common_distance(a, b)


__all__ = [
    "DEFAULT_MAX_OFFSET",
    "sift4_common",
    "sift4_common_distance",
    "sift4_simple",
    "sift4_simple_distance",
]
