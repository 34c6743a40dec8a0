"""Request and result value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional

from .metrics import Number


class Mode(str, Enum):
    SINGLE = "single"
    ALL = "all"
    LIST = "list"


class ResultRow(NamedTuple):
    index: int
    name: str
    value: Number


class AliasRow(NamedTuple):
    index: int
    name: str
    alias: str


ComparisonResult = List[ResultRow]


@dataclass(frozen=True)
class ComparisonRequest:
    """A single comparison of ``a`` against ``b``."""

    a: str
    b: str
    mode: Mode = Mode.ALL
    algorithm: Optional[str] = None
    normalize: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.a, str) or not isinstance(self.b, str):
            raise TypeError("Both compared values must be strings")
        object.__setattr__(self, "mode", Mode(self.mode))
        if self.mode is Mode.SINGLE and not (self.algorithm or "").strip():
            raise ValueError("Single algorithm mode requires an algorithm name or alias")

    @classmethod
    def single(
        cls, a: str, b: str, algorithm: str, *, normalize: bool = False
    ) -> "ComparisonRequest":
        return cls(a, b, mode=Mode.SINGLE, algorithm=algorithm, normalize=normalize)


__all__ = ["AliasRow", "ComparisonRequest", "ComparisonResult", "Mode", "ResultRow"]
