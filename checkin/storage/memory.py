from __future__ import annotations

import threading
from typing import Dict, List

from sqlmodel import SQLModel

from ..models import Guest, PersonKind, Staff, Volunteer
from ..schemas import GuestCreate, StaffCreate, VolunteerCreate, coerce_input
from .base import GuestInput, StaffInput, Storage, VolunteerInput


def _copy(record: SQLModel) -> SQLModel:
    return type(record)(**record.model_dump())


class MemoryStorage(Storage):
    """
    Process-local store. Each instance has its own tables and id counters;
    nothing is shared between instances.

    Safe to share across request threads. Records handed back are copies.
    """

    backend = "memory"

    def __init__(self) -> None:
        self._tables: Dict[PersonKind, Dict[int, SQLModel]] = {kind: {} for kind in PersonKind}
        self._next_ids: Dict[PersonKind, int] = {kind: 1 for kind in PersonKind}
        self._lock = threading.Lock()

    def _insert(self, kind: PersonKind, record: SQLModel):
        # counters only move forward, so deleted ids are never handed out again
        with self._lock:
            record.id = self._next_ids[kind]
            self._next_ids[kind] += 1
            self._tables[kind][record.id] = record
        return _copy(record)

    def _rows(self, kind: PersonKind) -> list:
        with self._lock:
            rows = list(self._tables[kind].values())
        return [_copy(r) for r in rows]

    # Volunteers

    def create_volunteer(self, data: VolunteerInput) -> Volunteer:
        payload = coerce_input(VolunteerCreate, data, "Invalid volunteer data")
        return self._insert(PersonKind.VOLUNTEER, Volunteer(**payload.model_dump()))

    def get_volunteers(self) -> List[Volunteer]:
        return self._rows(PersonKind.VOLUNTEER)

    def get_volunteers_by_category(self, area: str) -> List[Volunteer]:
        return [v for v in self._rows(PersonKind.VOLUNTEER) if v.area == area]

    # Guests

    def create_guest(self, data: GuestInput) -> Guest:
        payload = coerce_input(GuestCreate, data, "Invalid guest data")
        return self._insert(PersonKind.GUEST, Guest(**payload.model_dump()))

    def get_guests(self) -> List[Guest]:
        return self._rows(PersonKind.GUEST)

    # Staff

    def create_staff(self, data: StaffInput) -> Staff:
        payload = coerce_input(StaffCreate, data, "Invalid staff data")
        return self._insert(PersonKind.STAFF, Staff(**payload.model_dump()))

    def get_staff(self) -> List[Staff]:
        return self._rows(PersonKind.STAFF)

    # Cross-kind

    def delete_record(self, kind: PersonKind, record_id: int) -> bool:
        with self._lock:
            return self._tables[PersonKind(kind)].pop(record_id, None) is not None

    def distinct_names(self, kind: PersonKind) -> List[str]:
        return sorted({r.name for r in self._rows(PersonKind(kind))})
