"""Registry of the supported string comparison algorithms."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from rapidfuzz import fuzz, process

from . import metrics
from .errors import InvalidCatalogError, UnknownAlgorithmError
from .metrics import MetricFunction

logger = logging.getLogger(__name__)


class Category(str, Enum):
    EDIT_DISTANCE = "edit-distance"
    TOKEN_SET = "token-set"
    SEQUENCE_ALIGNMENT = "sequence-alignment"
    STATISTICAL = "statistical"
    LENGTH_BASED = "length-based"


class Polarity(str, Enum):
    """Whether larger raw values mean more different or more similar."""

    DISTANCE = "distance"
    SIMILARITY = "similarity"


class NativeRange(str, Enum):
    """Domain of an algorithm's raw output.

    ``UNBOUNDED`` scores are bounded only by ``max(len(a), len(b))``.
    """

    UNBOUNDED = "unbounded"
    UNIT_INTERVAL = "unit"
    SIGNED_UNIT_INTERVAL = "signed-unit"


SUPPORTED_CLASSIFICATIONS: frozenset[Tuple[Polarity, NativeRange]] = frozenset(
    {
        (Polarity.SIMILARITY, NativeRange.UNIT_INTERVAL),
        (Polarity.SIMILARITY, NativeRange.SIGNED_UNIT_INTERVAL),
        (Polarity.DISTANCE, NativeRange.UNIT_INTERVAL),
        (Polarity.DISTANCE, NativeRange.UNBOUNDED),
    }
)


@dataclass(frozen=True)
class AlgorithmEntry:
    """A single catalog record binding a metric function to its metadata."""

    name: str
    alias: str
    category: Category
    polarity: Polarity
    native_range: NativeRange
    function: MetricFunction = field(repr=False, compare=False)
    description: str = ""

    @property
    def classification(self) -> Tuple[Polarity, NativeRange]:
        return (self.polarity, self.native_range)

    def __call__(self, a: str, b: str) -> metrics.Number:
        return self.function(a, b)


def canonical_identifier(identifier: str) -> str:
    """Return the lookup key for a user supplied name or alias."""

    return str(identifier).strip().casefold().replace("-", "_")


class Catalog:
    """Immutable, ordered collection of :class:`AlgorithmEntry` records.

    Names and aliases share a single namespace; any collision is rejected at
    construction time.
    """

    def __init__(self, entries: Iterable[AlgorithmEntry]) -> None:
        ordered = tuple(entries)
        index: Dict[str, AlgorithmEntry] = {}
        names: set[str] = set()
        for entry in ordered:
            if entry.name in names:
                raise InvalidCatalogError(f"Duplicate algorithm name {entry.name!r}")
            names.add(entry.name)
            if entry.classification not in SUPPORTED_CLASSIFICATIONS:
                raise InvalidCatalogError(
                    f"Algorithm {entry.name!r} has unsupported classification "
                    f"{entry.polarity.value}/{entry.native_range.value}"
                )
            if not callable(entry.function):
                raise InvalidCatalogError(f"Algorithm {entry.name!r} has no metric function")
            for identifier in (entry.name, entry.alias):
                key = canonical_identifier(identifier)
                if not key:
                    raise InvalidCatalogError(
                        f"Algorithm {entry.name!r} has an empty name or alias"
                    )
                existing = index.get(key)
                if existing is not None and existing is not entry:
                    raise InvalidCatalogError(
                        f"Identifier {identifier!r} of {entry.name!r} collides with "
                        f"{existing.name!r}"
                    )
                index[key] = entry
        self._entries: Tuple[AlgorithmEntry, ...] = ordered
        self._index: Mapping[str, AlgorithmEntry] = MappingProxyType(index)
        logger.debug("Built catalog with %d algorithms", len(ordered))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[AlgorithmEntry]:
        return iter(self._entries)

    def __contains__(self, identifier: object) -> bool:
        if not isinstance(identifier, str):
            return False
        return canonical_identifier(identifier) in self._index

    def all_in_order(self) -> Tuple[AlgorithmEntry, ...]:
        return self._entries

    def identifiers(self) -> Tuple[str, ...]:
        return tuple(self._index.keys())

    def suggest(self, identifier: str) -> Optional[str]:
        """Return the closest known name or alias, if any is reasonably close."""

        match = process.extractOne(
            canonical_identifier(identifier),
            self.identifiers(),
            scorer=fuzz.ratio,
            score_cutoff=60.0,
        )
        return match[0] if match else None

    def lookup(self, identifier: str) -> AlgorithmEntry:
        """Resolve ``identifier`` against names and aliases."""

        entry = self._index.get(canonical_identifier(identifier))
        if entry is None:
            raise UnknownAlgorithmError(identifier, self.suggest(identifier))
        return entry


_D, _S = Polarity.DISTANCE, Polarity.SIMILARITY
_UNBOUNDED, _UNIT = NativeRange.UNBOUNDED, NativeRange.UNIT_INTERVAL
_EDIT, _TOKEN = Category.EDIT_DISTANCE, Category.TOKEN_SET
_ALIGN = Category.SEQUENCE_ALIGNMENT

# name, alias, category, polarity, native range, description
_REGISTRATIONS = (
    ("bag", "bag", _TOKEN, _D, _UNBOUNDED, "Multiset difference of characters"),
    ("cosine", "cos", _TOKEN, _S, _UNIT, "Cosine similarity of character counts"),
    (
        "damerau_levenshtein",
        "dlev",
        _EDIT,
        _D,
        _UNBOUNDED,
        "Edits including adjacent transpositions",
    ),
    (
        "entropy_ncd",
        "entncd",
        Category.STATISTICAL,
        _D,
        _UNIT,
        "Normalized compression distance with an entropy compressor",
    ),
    (
        "hamming",
        "ham",
        _EDIT,
        _D,
        _UNBOUNDED,
        "Position-wise mismatches plus the length difference",
    ),
    ("jaccard", "jac", _TOKEN, _S, _UNIT, "Intersection over union of characters"),
    ("jaro", "jar", _EDIT, _S, _UNIT, "Jaro similarity"),
    ("jaro_winkler", "jarw", _EDIT, _S, _UNIT, "Jaro similarity boosted by a common prefix"),
    ("levenshtein", "lev", _EDIT, _D, _UNBOUNDED, "Insertions, deletions and substitutions"),
    (
        "longest_common_subsequence",
        "lcsubseq",
        _ALIGN,
        _D,
        _UNBOUNDED,
        "Characters outside the longest common subsequence",
    ),
    (
        "longest_common_substring",
        "lcsubstr",
        _ALIGN,
        _D,
        _UNBOUNDED,
        "Characters outside the longest common substring",
    ),
    ("length", "len", Category.LENGTH_BASED, _D, _UNBOUNDED, "Absolute length difference"),
    ("lig3", "lig", _EDIT, _S, _UNIT, "Positional matches weighed against Levenshtein edits"),
    ("mlipns", "mli", _EDIT, _S, _UNIT, "Thresholded near-equality indicator"),
    ("overlap", "olap", _TOKEN, _S, _UNIT, "Overlap coefficient of characters"),
    ("prefix", "pre", _ALIGN, _D, _UNBOUNDED, "Characters outside the common prefix"),
    ("ratcliff_obershelp", "rat", _ALIGN, _S, _UNIT, "Gestalt pattern matching"),
    ("roberts", "rob", _TOKEN, _S, _UNIT, "Roberts similarity of character counts"),
    ("sift4_common", "scom", _EDIT, _D, _UNBOUNDED, "Sift4 with transpositions"),
    ("sift4_simple", "ssim", _EDIT, _D, _UNBOUNDED, "Sift4 without transpositions"),
    (
        "smith_waterman",
        "smithw",
        _ALIGN,
        _D,
        _UNBOUNDED,
        "Characters outside the best local alignment",
    ),
    ("sorensen_dice", "soredice", _TOKEN, _S, _UNIT, "Sorensen-Dice coefficient of characters"),
    ("suffix", "suf", _ALIGN, _D, _UNBOUNDED, "Characters outside the common suffix"),
    ("tversky", "tv", _TOKEN, _S, _UNIT, "Tversky index of characters"),
    ("yujian_bo", "ybo", _EDIT, _D, _UNIT, "Yujian-Bo normalized Levenshtein distance"),
)


def build_default_catalog() -> Catalog:
    """Bind every registration to its metric function."""

    return Catalog(
        AlgorithmEntry(
            name=name,
            alias=alias,
            category=category,
            polarity=polarity,
            native_range=native_range,
            function=getattr(metrics, name),
            description=description,
        )
        for name, alias, category, polarity, native_range, description in _REGISTRATIONS
    )


CATALOG = build_default_catalog()


__all__ = [
    "AlgorithmEntry",
    "CATALOG",
    "Catalog",
    "Category",
    "NativeRange",
    "Polarity",
    "SUPPORTED_CLASSIFICATIONS",
    "build_default_catalog",
    "canonical_identifier",
]
