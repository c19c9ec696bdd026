from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from checkin.config import Settings
from checkin.database import get_engine
from checkin.errors import StorageError
from checkin.main import create_app
from checkin.models import PersonKind
from checkin.storage import DatabaseStorage


@pytest.fixture
def broken_storage():
    # tables never created, so every statement fails
    store = DatabaseStorage(get_engine("sqlite://"), create_tables=False)
    yield store
    store.close()


def test_reads_raise_storage_error(broken_storage):
    with pytest.raises(StorageError) as exc_info:
        broken_storage.get_volunteers()

    assert exc_info.value.message == "Failed to fetch volunteers"


def test_writes_raise_storage_error(broken_storage, staff_data):
    with pytest.raises(StorageError):
        broken_storage.create_staff(staff_data(timeIn="9:00:00 AM"))


def test_delete_raises_storage_error(broken_storage):
    with pytest.raises(StorageError):
        broken_storage.delete_record(PersonKind.GUEST, 1)


def test_storage_error_is_opaque_500(broken_storage, guest_data):
    app = create_app(settings=Settings(STORAGE_BACKEND="database"), storage=broken_storage)
    client = TestClient(app)

    r = client.post("/api/guest", json=guest_data())

    assert r.status_code == 500
    assert r.json() == {"message": "Failed to register guest"}


def test_validation_runs_before_storage(broken_storage, volunteer_data):
    app = create_app(settings=Settings(STORAGE_BACKEND="database"), storage=broken_storage)
    client = TestClient(app)

    r = client.post("/api/volunteer", json=volunteer_data(area="attic"))

    assert r.status_code == 400
    assert r.json()["errors"][0]["field"] == "area"
