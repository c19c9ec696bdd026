from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Union

from ..models import Guest, PersonKind, Staff, Volunteer
from ..schemas import GuestCreate, StaffCreate, VolunteerCreate

VolunteerInput = Union[VolunteerCreate, Mapping[str, Any]]
GuestInput = Union[GuestCreate, Mapping[str, Any]]
StaffInput = Union[StaffCreate, Mapping[str, Any]]


class Storage(ABC):
    """
    Record store for the three record kinds.

    Every operation is a single atomic insert, select or delete. Create
    methods accept a create schema or a plain mapping (validated first) and
    raise ValidationError / StorageError from checkin.errors.
    Lists come back in identity order.
    """

    backend: str = "abstract"

    # Volunteers
    @abstractmethod
    def create_volunteer(self, data: VolunteerInput) -> Volunteer:
        ...

    @abstractmethod
    def get_volunteers(self) -> List[Volunteer]:
        ...

    @abstractmethod
    def get_volunteers_by_category(self, area: str) -> List[Volunteer]:
        ...

    # Guests
    @abstractmethod
    def create_guest(self, data: GuestInput) -> Guest:
        ...

    @abstractmethod
    def get_guests(self) -> List[Guest]:
        ...

    # Staff
    @abstractmethod
    def create_staff(self, data: StaffInput) -> Staff:
        ...

    @abstractmethod
    def get_staff(self) -> List[Staff]:
        ...

    # Cross-kind
    @abstractmethod
    def delete_record(self, kind: PersonKind, record_id: int) -> bool:
        """Hard delete of one row of `kind`. False when no such row exists."""

    @abstractmethod
    def distinct_names(self, kind: PersonKind) -> List[str]:
        """Distinct `name` values of `kind`, ascending."""

    def close(self) -> None:
        return None
