"""Public package interface for strsim."""

from .aliases import list_all
from .batch import compute_all, rank
from .catalog import (
    CATALOG,
    AlgorithmEntry,
    Catalog,
    Category,
    NativeRange,
    Polarity,
)
from .config import AppConfig, OutputConfig, ParallelismConfig, load_config
from .dispatch import compute
from .engine import run
from .errors import InvalidCatalogError, SimilarityError, UnknownAlgorithmError
from .types import AliasRow, ComparisonRequest, ComparisonResult, Mode, ResultRow

__all__ = [
    "AlgorithmEntry",
    "AliasRow",
    "AppConfig",
    "CATALOG",
    "Catalog",
    "Category",
    "ComparisonRequest",
    "ComparisonResult",
    "InvalidCatalogError",
    "Mode",
    "NativeRange",
    "OutputConfig",
    "ParallelismConfig",
    "Polarity",
    "ResultRow",
    "SimilarityError",
    "UnknownAlgorithmError",
    "compute",
    "compute_all",
    "list_all",
    "load_config",
    "rank",
    "run",
]
