from __future__ import annotations

import pydantic
import pytest

from checkin.config import Settings, _split_origins
from checkin.storage import DatabaseStorage, MemoryStorage, build_storage


def test_database_url_wins():
    s = Settings(DATABASE_URL=" postgresql://u:p@db/checkin ", DB_PATH="./x.sqlite")

    assert s.resolved_database_url == "postgresql://u:p@db/checkin"


@pytest.mark.parametrize(
    "db_path, expected",
    [
        ("./data/a.sqlite", "sqlite:///./data/a.sqlite"),
        ("data/a.sqlite", "sqlite:///./data/a.sqlite"),
        ("/var/lib/checkin/a.sqlite", "sqlite:////var/lib/checkin/a.sqlite"),
        ("sqlite:///./b.sqlite", "sqlite:///./b.sqlite"),
        ("", "sqlite:///./data/checkin.sqlite"),
    ],
)
def test_resolved_database_url_from_path(db_path, expected):
    assert Settings(DATABASE_URL="", DB_PATH=db_path).resolved_database_url == expected


def test_storage_backend_normalized():
    assert Settings(STORAGE_BACKEND=" Memory ").storage_backend == "memory"
    assert Settings(STORAGE_BACKEND="").storage_backend == "database"


def test_storage_backend_unknown():
    with pytest.raises(pydantic.ValidationError):
        Settings(STORAGE_BACKEND="redis")


def test_log_level_normalized():
    assert Settings(LOG_LEVEL="debug").log_level == "DEBUG"


def test_split_origins():
    assert _split_origins(None) == ["*"]
    assert _split_origins("https://a.org, https://b.org,") == ["https://a.org", "https://b.org"]
    assert _split_origins(["", " https://a.org "]) == ["https://a.org"]


def test_build_storage_memory():
    assert isinstance(build_storage(Settings(STORAGE_BACKEND="memory")), MemoryStorage)


def test_build_storage_database(tmp_path):
    db_file = tmp_path / "nested" / "checkin.sqlite"
    store = build_storage(Settings(STORAGE_BACKEND="database", DATABASE_URL="", DB_PATH=str(db_file)))
    try:
        assert isinstance(store, DatabaseStorage)
        assert db_file.parent.is_dir()
        assert store.get_volunteers() == []
    finally:
        store.close()


def test_cors_origins_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.org, https://b.org")

    assert Settings().cors_allow_origins == ["https://a.org", "https://b.org"]


def test_cors_origins_default_star(monkeypatch):
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)

    assert Settings().cors_allow_origins == ["*"]


def test_no_unused_environment_helpers():
    assert not hasattr(Settings, "is_prod")
