from __future__ import annotations

import logging
from typing import Optional

from ..config import Settings, get_settings
from ..database import get_engine
from .base import Storage
from .database import DatabaseStorage
from .memory import MemoryStorage

logger = logging.getLogger(__name__)


def build_storage(settings: Optional[Settings] = None) -> Storage:
    """
    Pick the record store named by STORAGE_BACKEND.
    """
    settings = settings or get_settings()

    if settings.storage_backend == "memory":
        logger.info("Using in-memory record store (data is lost on restart)")
        return MemoryStorage()

    url = settings.resolved_database_url
    logger.info("Using database record store at %s", url)
    return DatabaseStorage(get_engine(url))


__all__ = ["Storage", "MemoryStorage", "DatabaseStorage", "build_storage"]
