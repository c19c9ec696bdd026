from __future__ import annotations

import csv
import io
from typing import Dict, List, Tuple, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from ..models import PersonKind
from ..schemas import GuestRead, StaffRead, VolunteerRead
from ..storage import Storage

_EXPORTS: Dict[PersonKind, Tuple[Type[BaseModel], str]] = {
    PersonKind.VOLUNTEER: (VolunteerRead, "volunteers.csv"),
    PersonKind.GUEST: (GuestRead, "guests.csv"),
    PersonKind.STAFF: (StaffRead, "staff.csv"),
}


def _rows(storage: Storage, kind: PersonKind) -> list:
    if kind == PersonKind.VOLUNTEER:
        return storage.get_volunteers()
    if kind == PersonKind.GUEST:
        return storage.get_guests()
    return storage.get_staff()


def export_filename(kind: PersonKind) -> str:
    return _EXPORTS[PersonKind(kind)][1]


def export_csv(storage: Storage, kind: PersonKind) -> str:
    """
    One sheet per kind: a camelCase header row, then one line per record.
    Missing optional values are written as empty cells.
    """
    kind = PersonKind(kind)
    schema, _ = _EXPORTS[kind]
    columns: List[str] = [f.alias or to_camel(name) for name, f in schema.model_fields.items()]

    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=columns, lineterminator="\n")
    writer.writeheader()
    for record in _rows(storage, kind):
        row = schema.model_validate(record.model_dump()).model_dump(by_alias=True)
        writer.writerow({k: ("" if v is None else v) for k, v in row.items()})
    return buf.getvalue()
