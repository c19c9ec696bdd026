from __future__ import annotations

from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from checkin.config import Settings
from checkin.database import get_engine
from checkin.main import create_app
from checkin.storage import DatabaseStorage, MemoryStorage

Factory = Callable[..., Dict[str, Any]]


@pytest.fixture(params=["memory", "database"])
def storage(request, tmp_path):
    """Each test gets its own isolated store; runs once per backend."""
    if request.param == "memory":
        store = MemoryStorage()
    else:
        store = DatabaseStorage(get_engine(f"sqlite:///{tmp_path / 'checkin.sqlite'}"))
    yield store
    store.close()


@pytest.fixture
def client():
    app = create_app(settings=Settings(STORAGE_BACKEND="memory"), storage=MemoryStorage())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def volunteer_data() -> Factory:
    def _make(**overrides: Any) -> Dict[str, Any]:
        data = {
            "name": "Ann Porter",
            "date": "7/22/2025",
            "timeIn": "9:02:11 AM",
            "area": "garden",
            "activities": "Weeding",
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def guest_data() -> Factory:
    def _make(**overrides: Any) -> Dict[str, Any]:
        data = {
            "name": "Carla Reyes",
            "email": "carla.reyes@gmail.com",
            "reason": "historic",
            "date": "7/22/2025",
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def staff_data() -> Factory:
    def _make(**overrides: Any) -> Dict[str, Any]:
        data = {
            "name": "Frank Ortiz",
            "date": "7/22/2025",
        }
        data.update(overrides)
        return data

    return _make
