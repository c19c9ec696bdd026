from __future__ import annotations

from typing import Annotated, Any, List, Literal, Mapping, Optional, Type, TypeVar, Union

import pydantic
from pydantic import BaseModel, ConfigDict, EmailStr, Field as PydField, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .errors import ValidationError
from .models.guest import GUEST_REASONS
from .models.volunteer import VOLUNTEER_AREAS


class CamelModel(BaseModel):
    """
    Wire format is camelCase (timeIn, joinNewsletter, ...); Python code uses
    snake_case field names. Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


# -----------------------------
# Create schemas (do NOT use DB models as input)
# -----------------------------

class VolunteerCreate(CamelModel):
    name: str = PydField(..., min_length=1)
    date: str = PydField(..., min_length=1)
    time_in: str = PydField(..., min_length=1)
    time_out: Optional[str] = None
    area: str
    activities: str

    @field_validator("time_out", mode="before")
    @classmethod
    def _norm_time_out(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("area")
    @classmethod
    def _known_area(cls, v: str) -> str:
        if v not in VOLUNTEER_AREAS:
            raise ValueError(f"must be one of: {', '.join(VOLUNTEER_AREAS)}")
        return v


class GuestCreate(CamelModel):
    name: str = PydField(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None

    # reason is declared before the wedding fields so their validators can see it
    reason: str
    join_newsletter: bool = False

    bride_name: Optional[str] = None
    groom_name: Optional[str] = None
    tour_guide: Optional[str] = None

    date: str = PydField(..., min_length=1)

    @field_validator("phone", "tour_guide", mode="before")
    @classmethod
    def _norm_optional(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("join_newsletter", mode="before")
    @classmethod
    def _norm_join_newsletter(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("reason")
    @classmethod
    def _known_reason(cls, v: str) -> str:
        if v not in GUEST_REASONS:
            raise ValueError(f"must be one of: {', '.join(GUEST_REASONS)}")
        return v

    @model_validator(mode="before")
    @classmethod
    def _wedding_keys_present(cls, data: Any) -> Any:
        # absent keys are filled in under their camelCase names so the wedding
        # check runs on them and reports brideName/groomName
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, alias in (("bride_name", "brideName"), ("groom_name", "groomName")):
            if name not in data and alias not in data:
                data[alias] = None
        return data

    @field_validator("bride_name", "groom_name", mode="before")
    @classmethod
    def _required_for_wedding(cls, v: Any, info: ValidationInfo) -> Any:
        v = _blank_to_none(v)
        if v is None and info.data.get("reason") == "wedding":
            raise ValueError("required for a wedding tour")
        return v


class StaffCreate(CamelModel):
    """
    A single clock event. Clock-in sends timeIn, clock-out sends timeOut;
    nothing stops a caller from sending both or neither.
    """

    name: str = PydField(..., min_length=1)
    date: str = PydField(..., min_length=1)
    time_in: Optional[str] = None
    time_out: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("time_in", "time_out", "notes", mode="before")
    @classmethod
    def _norm_optional(cls, v: Any) -> Any:
        return _blank_to_none(v)


# -----------------------------
# Read schemas
# -----------------------------

class VolunteerRead(CamelModel):
    id: int
    name: str
    date: str
    time_in: str
    time_out: Optional[str] = None
    area: str
    activities: str


class GuestRead(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    reason: str
    join_newsletter: bool = False
    bride_name: Optional[str] = None
    groom_name: Optional[str] = None
    tour_guide: Optional[str] = None
    date: str


class StaffRead(CamelModel):
    id: int
    name: str
    date: str
    time_in: Optional[str] = None
    time_out: Optional[str] = None
    notes: Optional[str] = None


# -----------------------------
# Unified people view (closed tagged union)
# -----------------------------

class VolunteerPerson(VolunteerRead):
    type: Literal["volunteer"] = "volunteer"


class GuestPerson(GuestRead):
    type: Literal["guest"] = "guest"


class StaffPerson(StaffRead):
    type: Literal["staff"] = "staff"


Person = Annotated[
    Union[VolunteerPerson, GuestPerson, StaffPerson],
    PydField(discriminator="type"),
]


class StatsRead(BaseModel):
    volunteers: int
    guests: int
    hours: int


class VolunteerArea(BaseModel):
    id: str
    activities: List[str]


# -----------------------------
# Input coercion for non-HTTP callers
# -----------------------------

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def coerce_input(schema: Type[SchemaT], data: Union[SchemaT, Mapping[str, Any]], message: str) -> SchemaT:
    """
    Accept an already-validated schema instance or a plain mapping.

    Mappings are validated here; failures raise ValidationError listing the
    offending fields.
    """
    if isinstance(data, schema):
        return data
    if not isinstance(data, Mapping):
        raise ValidationError(message, [{"field": "__root__", "message": "expected an object"}])
    try:
        return schema.model_validate(dict(data))
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(exc, message) from exc
