from __future__ import annotations

from collections.abc import Iterator

import pytest

from store.registry import reset_stores


@pytest.fixture(autouse=True)
def _fresh_stores() -> Iterator[None]:
    reset_stores()
    yield
    reset_stores()
