from __future__ import annotations

import pytest

from checkin.errors import ValidationError
from checkin.models import PersonKind
from checkin.schemas import GuestPerson, StaffPerson, VolunteerPerson
from checkin.services.registry import Registry, parse_kind


@pytest.fixture
def registry(storage):
    return Registry(storage)


@pytest.fixture
def populated(storage, volunteer_data, guest_data, staff_data):
    storage.create_volunteer(volunteer_data(name="Bob"))
    storage.create_volunteer(volunteer_data(name="Ann"))
    storage.create_volunteer(volunteer_data(name="Bob", date="7/23/2025"))
    storage.create_guest(guest_data(name="Carla"))
    storage.create_staff(staff_data(name="Frank", timeIn="8:00:00 AM"))
    storage.create_staff(staff_data(name="Frank", timeOut="4:00:00 PM"))
    return storage


def test_all_people_concatenates_kinds_in_order(registry, populated):
    people = registry.get_all_people()

    assert len(people) == 3 + 1 + 2
    assert [p.type for p in people] == ["volunteer"] * 3 + ["guest"] + ["staff"] * 2
    assert isinstance(people[0], VolunteerPerson)
    assert isinstance(people[3], GuestPerson)
    assert isinstance(people[4], StaffPerson)
    # identities repeat across kinds; (type, id) is the key
    assert {(p.type, p.id) for p in people} == {
        ("volunteer", 1),
        ("volunteer", 2),
        ("volunteer", 3),
        ("guest", 1),
        ("staff", 1),
        ("staff", 2),
    }


def test_all_people_carries_record_attributes(registry, populated):
    guest = registry.get_all_people()[3]
    dumped = guest.model_dump(by_alias=True)

    assert dumped["type"] == "guest"
    assert dumped["email"] == "carla.reyes@gmail.com"
    assert dumped["joinNewsletter"] is False


def test_all_people_empty(registry):
    assert registry.get_all_people() == []


def test_all_people_name_filter(registry, populated):
    people = registry.get_all_people("  bO ")

    assert [p.name for p in people] == ["Bob", "Bob"]


def test_delete_is_scoped_to_kind(registry, populated):
    assert registry.delete_person("staff", 1) is True

    remaining = {(p.type, p.id) for p in registry.get_all_people()}
    assert ("staff", 1) not in remaining
    assert ("volunteer", 1) in remaining
    assert ("guest", 1) in remaining


def test_delete_missing_returns_false(registry, populated):
    assert registry.delete_person(PersonKind.GUEST, 5) is False
    assert len(registry.get_all_people()) == 6


def test_delete_twice(registry, populated):
    assert registry.delete_person("guest", 1) is True
    assert registry.delete_person("guest", 1) is False


def test_delete_unknown_kind(registry, populated):
    with pytest.raises(ValidationError) as exc_info:
        registry.delete_person("donor", 1)

    assert exc_info.value.message == "Invalid person type"
    assert exc_info.value.fields == ["type"]


@pytest.mark.parametrize("bad_id", ["abc", None, "1.5"])
def test_delete_non_numeric_id(registry, populated, bad_id):
    with pytest.raises(ValidationError) as exc_info:
        registry.delete_person("guest", bad_id)

    assert exc_info.value.message == "Invalid person ID"
    assert exc_info.value.fields == ["id"]
    assert len(registry.get_all_people()) == 6


def test_unique_volunteer_names(registry, populated):
    assert registry.get_unique_volunteer_names() == ["Ann", "Bob"]


def test_unique_staff_names(registry, populated):
    assert registry.get_unique_staff_names() == ["Frank"]


def test_unique_names_survive_partial_delete(registry, populated):
    registry.delete_person("volunteer", 1)

    # another "Bob" row is still there
    assert registry.get_unique_volunteer_names() == ["Ann", "Bob"]


def test_parse_kind():
    assert parse_kind("volunteer") is PersonKind.VOLUNTEER
    assert parse_kind(PersonKind.STAFF) is PersonKind.STAFF
    with pytest.raises(ValidationError):
        parse_kind("Volunteer")
