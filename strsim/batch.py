"""Run every catalog algorithm over one pair of strings."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, List

from .catalog import CATALOG, Catalog
from .dispatch import score_entry
from .types import ComparisonResult, ResultRow

logger = logging.getLogger(__name__)


def compute_all(
    a: str,
    b: str,
    normalize: bool = False,
    *,
    catalog: Catalog = CATALOG,
    workers: int = 1,
) -> ComparisonResult:
    """Return one :class:`ResultRow` per catalog entry, in catalog order.

    With ``workers > 1`` the metrics run on a thread pool; rows are sorted back
    into catalog order before returning.
    """

    if workers < 1:
        raise ValueError("workers must be at least 1")

    entries = catalog.all_in_order()
    start = time.perf_counter()
    if workers == 1:
        rows = [
            ResultRow(index, entry.name, score_entry(entry, a, b, normalize))
            for index, entry in enumerate(entries)
        ]
    else:
        rows = []
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(score_entry, entry, a, b, normalize): (index, entry)
                for index, entry in enumerate(entries)
            }
            for fut in as_completed(futures):
                index, entry = futures[fut]
                rows.append(ResultRow(index, entry.name, fut.result()))
        rows.sort(key=lambda row: row.index)

    logger.debug(
        "Computed %d algorithms in %.3fs (workers=%d, normalize=%s)",
        len(rows),
        time.perf_counter() - start,
        workers,
        normalize,
    )
    return rows


def rank(rows: Iterable[ResultRow]) -> List[ResultRow]:
    """Order rows from most to least similar, ties kept in catalog order.

    Only meaningful for normalized rows, where larger always means closer.
    """

    return sorted(rows, key=lambda row: (-row.value, row.index))


__all__ = ["compute_all", "rank"]
