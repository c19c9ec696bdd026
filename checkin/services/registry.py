from __future__ import annotations

from typing import List, Optional, Union

from ..errors import ValidationError
from ..models import PersonKind
from ..schemas import GuestPerson, Person, StaffPerson, VolunteerPerson
from ..storage import Storage

PERSON_KINDS = tuple(k.value for k in PersonKind)


def parse_kind(raw: Union[str, PersonKind]) -> PersonKind:
    """
    Validate a kind tag coming from a caller. Unknown tags are input errors.
    """
    try:
        return PersonKind(raw)
    except ValueError:
        raise ValidationError(
            "Invalid person type",
            [{"field": "type", "message": f"must be one of: {', '.join(PERSON_KINDS)}"}],
        ) from None


class Registry:
    """
    One logical "people" collection over the three record kinds.

    The rows for repeat visits stay separate; only names are deduplicated,
    for the "tap your name" lists on the check-in screens.
    """

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def get_all_people(self, query: Optional[str] = None) -> List[Person]:
        """
        All volunteers, then all guests, then all staff, each tagged with its kind.

        `query` keeps only entries whose name contains it (case-insensitive).
        """
        people: List[Person] = []
        people.extend(VolunteerPerson.model_validate(v.model_dump()) for v in self.storage.get_volunteers())
        people.extend(GuestPerson.model_validate(g.model_dump()) for g in self.storage.get_guests())
        people.extend(StaffPerson.model_validate(s.model_dump()) for s in self.storage.get_staff())

        needle = (query or "").strip().lower()
        if needle:
            people = [p for p in people if needle in p.name.lower()]
        return people

    def delete_person(self, kind: Union[str, PersonKind], person_id: int) -> bool:
        # (kind, id) is the key: id 5 in "guest" never touches staff/volunteer id 5
        kind = parse_kind(kind)
        try:
            record_id = int(person_id)
        except (TypeError, ValueError):
            raise ValidationError(
                "Invalid person ID",
                [{"field": "id", "message": "must be an integer"}],
            ) from None
        return self.storage.delete_record(kind, record_id)

    def get_unique_volunteer_names(self) -> List[str]:
        return self.storage.distinct_names(PersonKind.VOLUNTEER)

    def get_unique_staff_names(self) -> List[str]:
        return self.storage.distinct_names(PersonKind.STAFF)
