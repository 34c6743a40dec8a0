"""Route a :class:`ComparisonRequest` to the matching component."""

from __future__ import annotations

from typing import List, Union

from .aliases import list_all
from .batch import compute_all
from .catalog import CATALOG, Catalog
from .dispatch import compute
from .types import AliasRow, ComparisonRequest, Mode, ResultRow


def run(
    request: ComparisonRequest,
    *,
    catalog: Catalog = CATALOG,
    workers: int = 1,
) -> Union[List[ResultRow], List[AliasRow]]:
    if request.mode is Mode.LIST:
        return list_all(catalog)
    if request.mode is Mode.ALL:
        return compute_all(
            request.a,
            request.b,
            request.normalize,
            catalog=catalog,
            workers=workers,
        )
    algorithm = request.algorithm or ""
    value = compute(request.a, request.b, algorithm, request.normalize, catalog=catalog)
    return [ResultRow(0, catalog.lookup(algorithm).name, value)]


__all__ = ["run"]
