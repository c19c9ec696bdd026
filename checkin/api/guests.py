from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..schemas import GuestCreate, GuestRead
from ..storage import Storage
from .deps import get_storage

router = APIRouter(prefix="/api/guest", tags=["guests"])


@router.post("", response_model=GuestRead)
def create_guest(payload: GuestCreate, storage: Storage = Depends(get_storage)) -> GuestRead:
    """
    Register a guest.

    Wedding tours (reason=wedding) must carry brideName and groomName.
    """
    guest = storage.create_guest(payload)
    return GuestRead.model_validate(guest.model_dump())


@router.get("", response_model=List[GuestRead])
def list_guests(storage: Storage = Depends(get_storage)) -> List[GuestRead]:
    return [GuestRead.model_validate(g.model_dump()) for g in storage.get_guests()]
