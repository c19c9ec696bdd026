from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator, List

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, select

from ..database import init_db, session_scope
from ..errors import StorageError
from ..models import MODELS_BY_KIND, Guest, PersonKind, Staff, Volunteer
from ..schemas import GuestCreate, StaffCreate, VolunteerCreate, coerce_input
from .base import GuestInput, StaffInput, Storage, VolunteerInput

logger = logging.getLogger(__name__)


@contextmanager
def _storage_errors(action: str) -> Generator[None, None, None]:
    """
    Turn driver/ORM failures into an opaque StorageError. No retry.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Storage failure: %s", action)
        raise StorageError(f"Failed to {action}") from exc


class DatabaseStorage(Storage):
    """
    SQLModel-backed store over an explicitly constructed engine.
    """

    backend = "database"

    def __init__(self, engine: Engine, *, create_tables: bool = True) -> None:
        self.engine = engine
        if create_tables:
            with _storage_errors("initialize tables"):
                init_db(engine)

    def _insert(self, record: SQLModel, action: str):
        with _storage_errors(action):
            with session_scope(self.engine) as session:
                session.add(record)
                session.flush()
                session.refresh(record)
            return record

    def _select_all(self, model, action: str) -> list:
        with _storage_errors(action):
            with session_scope(self.engine) as session:
                return list(session.exec(select(model).order_by(model.id)).all())

    # Volunteers

    def create_volunteer(self, data: VolunteerInput) -> Volunteer:
        payload = coerce_input(VolunteerCreate, data, "Invalid volunteer data")
        return self._insert(Volunteer(**payload.model_dump()), "create volunteer check-in")

    def get_volunteers(self) -> List[Volunteer]:
        return self._select_all(Volunteer, "fetch volunteers")

    def get_volunteers_by_category(self, area: str) -> List[Volunteer]:
        with _storage_errors("fetch volunteers"):
            with session_scope(self.engine) as session:
                stmt = select(Volunteer).where(Volunteer.area == area).order_by(Volunteer.id)
                return list(session.exec(stmt).all())

    # Guests

    def create_guest(self, data: GuestInput) -> Guest:
        payload = coerce_input(GuestCreate, data, "Invalid guest data")
        return self._insert(Guest(**payload.model_dump()), "register guest")

    def get_guests(self) -> List[Guest]:
        return self._select_all(Guest, "fetch guests")

    # Staff

    def create_staff(self, data: StaffInput) -> Staff:
        payload = coerce_input(StaffCreate, data, "Invalid staff data")
        return self._insert(Staff(**payload.model_dump()), "clock in/out")

    def get_staff(self) -> List[Staff]:
        return self._select_all(Staff, "fetch staff records")

    # Cross-kind

    def delete_record(self, kind: PersonKind, record_id: int) -> bool:
        model = MODELS_BY_KIND[PersonKind(kind)]
        with _storage_errors("delete person"):
            with session_scope(self.engine) as session:
                row = session.get(model, record_id)
                if row is None:
                    return False
                session.delete(row)
                return True

    def distinct_names(self, kind: PersonKind) -> List[str]:
        model = MODELS_BY_KIND[PersonKind(kind)]
        with _storage_errors(f"fetch {PersonKind(kind).value} names"):
            with session_scope(self.engine) as session:
                stmt = select(model.name).distinct().order_by(model.name)
                return [str(name) for name in session.exec(stmt).all()]

    def close(self) -> None:
        self.engine.dispose()
