from __future__ import annotations

import pytest

from strsim.catalog import CATALOG


@pytest.fixture(params=[entry.name for entry in CATALOG], ids=lambda name: name)
def entry(request):
    return CATALOG.lookup(request.param)
