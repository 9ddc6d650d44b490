from __future__ import annotations

import pytest

from wangtiles.tiles import TileCatalog, build_catalog


@pytest.fixture
def catalog() -> TileCatalog:
    """The shared, process-wide tile catalog."""
    return build_catalog()
