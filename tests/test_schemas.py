from __future__ import annotations

import pytest

from checkin.errors import ValidationError
from checkin.schemas import GuestCreate, StaffCreate, VolunteerCreate, coerce_input


def test_volunteer_accepts_camel_and_snake_case(volunteer_data):
    camel = VolunteerCreate.model_validate(volunteer_data())
    snake = VolunteerCreate.model_validate(
        {"name": "Ann Porter", "date": "7/22/2025", "time_in": "9:02:11 AM", "area": "garden", "activities": "Weeding"}
    )

    assert camel == snake
    assert camel.model_dump(by_alias=True)["timeIn"] == "9:02:11 AM"


def test_volunteer_blank_name_rejected(volunteer_data):
    with pytest.raises(ValidationError) as exc_info:
        coerce_input(VolunteerCreate, volunteer_data(name="   "), "Invalid volunteer data")

    assert exc_info.value.fields == ["name"]


def test_volunteer_unknown_area(volunteer_data):
    with pytest.raises(ValidationError) as exc_info:
        coerce_input(VolunteerCreate, volunteer_data(area="attic"), "Invalid volunteer data")

    assert exc_info.value.errors[0]["field"] == "area"
    assert exc_info.value.errors[0]["message"].startswith("must be one of")


def test_volunteer_blank_time_out_is_absent(volunteer_data):
    payload = VolunteerCreate.model_validate(volunteer_data(timeOut=""))

    assert payload.time_out is None


def test_wedding_requires_bride_and_groom(guest_data):
    with pytest.raises(ValidationError) as exc_info:
        coerce_input(GuestCreate, guest_data(reason="wedding", brideName=" "), "Invalid guest data")

    assert exc_info.value.fields == ["brideName", "groomName"]


def test_wedding_fields_left_out_are_named_in_camel_case(guest_data):
    with pytest.raises(ValidationError) as exc_info:
        coerce_input(GuestCreate, guest_data(reason="wedding"), "Invalid guest data")

    assert exc_info.value.fields == ["brideName", "groomName"]


def test_non_wedding_ignores_wedding_fields(guest_data):
    payload = GuestCreate.model_validate(guest_data(reason="donation"))

    assert payload.bride_name is None
    assert payload.join_newsletter is False


def test_guest_join_newsletter_null_means_false(guest_data):
    assert GuestCreate.model_validate(guest_data(joinNewsletter=None)).join_newsletter is False


def test_guest_bad_email_and_reason(guest_data):
    with pytest.raises(ValidationError) as exc_info:
        coerce_input(GuestCreate, guest_data(email="not-an-email", reason="party"), "Invalid guest data")

    assert set(exc_info.value.fields) == {"email", "reason"}


def test_staff_blank_optionals_are_absent(staff_data):
    payload = StaffCreate.model_validate(staff_data(timeIn="8:00:00 AM", timeOut="", notes="  "))

    assert payload.time_in == "8:00:00 AM"
    assert payload.time_out is None
    assert payload.notes is None


def test_coerce_input_rejects_non_mapping():
    with pytest.raises(ValidationError) as exc_info:
        coerce_input(StaffCreate, ["Frank"], "Invalid staff data")

    assert exc_info.value.fields == ["__root__"]
