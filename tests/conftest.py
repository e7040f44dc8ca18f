from __future__ import annotations

import pytest

from core.storage import InMemoryStorage
from services.api.main import create_app


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def app(storage: InMemoryStorage):
    return create_app(storage)
