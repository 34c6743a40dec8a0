"""Resolve an algorithm and compute one score."""

from __future__ import annotations

import logging

from .catalog import CATALOG, AlgorithmEntry, Catalog
from .metrics import Number
from .normalize import normalize as normalize_value

logger = logging.getLogger(__name__)


def score_entry(entry: AlgorithmEntry, a: str, b: str, normalize: bool = False) -> Number:
    """Run ``entry``'s metric and optionally normalize the raw value."""

    raw = entry(a, b)
    if not normalize:
        return raw
    value = normalize_value(raw, entry, a, b)
    logger.debug("%s: raw=%r normalized=%r", entry.name, raw, value)
    return value


def compute(
    a: str,
    b: str,
    algorithm: str,
    normalize: bool = False,
    *,
    catalog: Catalog = CATALOG,
) -> Number:
    """Compare ``a`` with ``b`` using the algorithm named by ``algorithm``.

    ``algorithm`` may be a canonical name or an alias. Raises
    :class:`~strsim.errors.UnknownAlgorithmError` when it matches nothing.
    Without ``normalize`` the algorithm's native value is returned unchanged.
    """

    entry = catalog.lookup(algorithm)
    logger.debug("Resolved %r to %s", algorithm, entry.name)
    return score_entry(entry, a, b, normalize)


__all__ = ["compute", "score_entry"]
