from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from ..schemas import Person
from ..services.registry import Registry
from .deps import get_registry

router = APIRouter(prefix="/api/people", tags=["people"])


@router.get("", response_model=List[Person])
def list_people(
    q: Optional[str] = None,
    registry: Registry = Depends(get_registry),
) -> List[Person]:
    """
    Volunteers, guests and staff in one list, each with a `type` tag.
    `q` filters by name (case-insensitive substring).
    """
    return registry.get_all_people(q)


@router.delete("/{person_type}/{person_id}")
def delete_person(
    person_type: str,
    person_id: int,
    registry: Registry = Depends(get_registry),
) -> Dict[str, Any]:
    """
    Hard delete by (type, id). Unknown type -> 400, no such row -> 404.
    """
    if not registry.delete_person(person_type, person_id):
        raise HTTPException(status_code=404, detail="Person not found")
    return {"message": "Person deleted successfully"}
