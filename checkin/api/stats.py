from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from ..schemas import StatsRead
from ..services.exports import export_csv, export_filename
from ..services.registry import parse_kind
from ..services.stats import compute_stats
from ..storage import Storage
from .deps import get_storage

router = APIRouter(prefix="/api", tags=["reporting"])


@router.get("/stats", response_model=StatsRead)
def stats(storage: Storage = Depends(get_storage)) -> StatsRead:
    return StatsRead(**asdict(compute_stats(storage)))


@router.get("/export/{person_type}")
def export(person_type: str, storage: Storage = Depends(get_storage)) -> Response:
    """
    CSV download of one record kind (volunteer, guest or staff).
    """
    kind = parse_kind(person_type)
    return Response(
        content=export_csv(storage, kind),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(kind)}"'},
    )
