"""Text rendering of comparison results."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from tabulate import tabulate

from .catalog import CATALOG, Catalog
from .config import OutputConfig, coerce_config
from .metrics import Number
from .types import AliasRow, ResultRow

RESULT_HEADERS = ("#", "algorithm", "distance")
ALIAS_HEADERS = ("#", "algorithm", "alias")
VERBOSE_ALIAS_HEADERS = ALIAS_HEADERS + ("category", "polarity", "range", "description")


def format_value(value: Number, precision: int = 2) -> str:
    """Integers print without a decimal point; floats are rounded."""

    if isinstance(value, int):
        return str(int(value))
    return f"{float(value):.{precision}f}"


def _table(rows: Sequence[Sequence[str]], headers: Sequence[str], tablefmt: str) -> str:
    if not rows:
        return "(no data)"
    return tabulate(rows, headers=list(headers), tablefmt=tablefmt, disable_numparse=True)


def render_results(
    rows: Iterable[ResultRow],
    output: OutputConfig | Mapping[str, Any] | None = None,
) -> str:
    cfg = coerce_config(output, OutputConfig, "output")
    data = [
        [str(row.index), row.name, format_value(row.value, cfg.precision)] for row in rows
    ]
    return _table(data, RESULT_HEADERS, cfg.tablefmt)


def render_aliases(
    rows: Iterable[AliasRow],
    output: OutputConfig | Mapping[str, Any] | None = None,
    *,
    verbose: bool = False,
    catalog: Catalog = CATALOG,
) -> str:
    cfg = coerce_config(output, OutputConfig, "output")
    data = []
    for row in rows:
        cells = [str(row.index), row.name, row.alias]
        if verbose:
            entry = catalog.lookup(row.name)
            cells.extend(
                [
                    entry.category.value,
                    entry.polarity.value,
                    entry.native_range.value,
                    entry.description,
                ]
            )
        data.append(cells)
    headers = VERBOSE_ALIAS_HEADERS if verbose else ALIAS_HEADERS
    return _table(data, headers, cfg.tablefmt)


__all__ = [
    "ALIAS_HEADERS",
    "RESULT_HEADERS",
    "VERBOSE_ALIAS_HEADERS",
    "format_value",
    "render_aliases",
    "render_results",
]
