from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..schemas import StaffCreate, StaffRead
from ..services.registry import Registry
from ..storage import Storage
from .deps import get_registry, get_storage

router = APIRouter(prefix="/api", tags=["staff"])


@router.post("/employee-clock", response_model=StaffRead)
def clock(payload: StaffCreate, storage: Storage = Depends(get_storage)) -> StaffRead:
    """
    Record a clock-in (timeIn) or clock-out (timeOut) event.

    Clock-out inserts its own row; it does not update the matching clock-in.
    """
    row = storage.create_staff(payload)
    return StaffRead.model_validate(row.model_dump())


@router.get("/employee-clock", response_model=List[StaffRead])
def list_clock_events(storage: Storage = Depends(get_storage)) -> List[StaffRead]:
    return [StaffRead.model_validate(s.model_dump()) for s in storage.get_staff()]


@router.get("/staff-names", response_model=List[str])
def staff_names(registry: Registry = Depends(get_registry)) -> List[str]:
    return registry.get_unique_staff_names()
