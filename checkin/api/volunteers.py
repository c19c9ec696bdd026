from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends

from ..models.volunteer import VOLUNTEER_AREAS
from ..schemas import VolunteerArea, VolunteerCreate, VolunteerRead
from ..services.registry import Registry
from ..storage import Storage
from .deps import get_registry, get_storage

router = APIRouter(prefix="/api", tags=["volunteers"])


@router.post("/volunteer", response_model=VolunteerRead)
def create_volunteer(payload: VolunteerCreate, storage: Storage = Depends(get_storage)) -> VolunteerRead:
    """
    Volunteer check-in. Repeat check-ins create new rows.
    """
    volunteer = storage.create_volunteer(payload)
    return VolunteerRead.model_validate(volunteer.model_dump())


@router.get("/volunteer", response_model=List[VolunteerRead])
def list_volunteers(
    category: Optional[str] = None,
    storage: Storage = Depends(get_storage),
) -> List[VolunteerRead]:
    """
    All check-ins, or only those whose area equals `category` exactly.
    """
    if category:
        rows = storage.get_volunteers_by_category(category)
    else:
        rows = storage.get_volunteers()
    return [VolunteerRead.model_validate(v.model_dump()) for v in rows]


@router.get("/volunteer-names", response_model=List[str])
def volunteer_names(registry: Registry = Depends(get_registry)) -> List[str]:
    """
    Returning-volunteer list: each name once, ascending.
    """
    return registry.get_unique_volunteer_names()


@router.get("/volunteer-areas", response_model=List[VolunteerArea])
def volunteer_areas() -> List[VolunteerArea]:
    return [VolunteerArea(id=area, activities=list(acts)) for area, acts in VOLUNTEER_AREAS.items()]
