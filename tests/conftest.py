from __future__ import annotations

import pytest

from merge_uses.classify import classify_base


@pytest.fixture(autouse=True)
def no_warnings(recwarn):
    yield
    assert len(recwarn) == 0


@pytest.fixture(autouse=True)
def reset_caches():
    classify_base.cache_clear()
