from __future__ import annotations

from fastapi import Depends, Request

from ..services.registry import Registry
from ..storage import Storage


def get_storage(request: Request) -> Storage:
    """
    FastAPI dependency: the record store built (or injected) by create_app().
        def route(storage: Storage = Depends(get_storage)):
            ...
    """
    return request.app.state.storage


def get_registry(storage: Storage = Depends(get_storage)) -> Registry:
    return Registry(storage)
