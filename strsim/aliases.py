"""Ordered ``(index, name, alias)`` view over the catalog."""

from __future__ import annotations

from typing import List

from .catalog import CATALOG, Catalog
from .types import AliasRow


def list_all(catalog: Catalog = CATALOG) -> List[AliasRow]:
    return [
        AliasRow(index, entry.name, entry.alias)
        for index, entry in enumerate(catalog.all_in_order())
    ]


__all__ = ["list_all"]
