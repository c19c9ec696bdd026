from __future__ import annotations

import logging
from typing import Any, Dict, List

from checkin.config import get_settings
from checkin.storage import Storage, build_storage

logger = logging.getLogger(__name__)

DEMO_DATE = "7/22/2025"

DEMO_VOLUNTEERS: List[Dict[str, Any]] = [
    {"name": "Ann Porter", "date": DEMO_DATE, "timeIn": "9:02:11 AM", "area": "garden", "activities": "Weeding, Pruning"},
    {"name": "Bob Lake", "date": DEMO_DATE, "timeIn": "9:15:40 AM", "area": "firstFloor", "activities": "Reception desk"},
    {"name": "Ann Porter", "date": "7/23/2025", "timeIn": "10:00:03 AM", "area": "secondFloor", "activities": "Laundry"},
]

DEMO_GUESTS: List[Dict[str, Any]] = [
    {"name": "Carla Reyes", "email": "carla.reyes@gmail.com", "reason": "historic", "joinNewsletter": True, "date": DEMO_DATE},
    {
        "name": "Dana & Eli",
        "email": "dana.eli.wedding@gmail.com",
        "reason": "wedding",
        "brideName": "Dana",
        "groomName": "Eli",
        "tourGuide": "sarah",
        "date": DEMO_DATE,
    },
]

DEMO_STAFF: List[Dict[str, Any]] = [
    {"name": "Frank Ortiz", "date": DEMO_DATE, "timeIn": "8:00:00 AM"},
    {"name": "Frank Ortiz", "date": DEMO_DATE, "timeOut": "4:30:00 PM", "notes": "Closed gift shop"},
    {"name": "Gina Hall", "date": DEMO_DATE, "timeIn": "9:00:00 AM", "timeOut": "1:00:00 PM"},
]


def seed(storage: Storage) -> Dict[str, int]:
    """
    Insert a small, realistic day of front-desk activity.
    Not idempotent: every run adds new rows (there are no updates).
    """
    for row in DEMO_VOLUNTEERS:
        storage.create_volunteer(row)
    for row in DEMO_GUESTS:
        storage.create_guest(row)
    for row in DEMO_STAFF:
        storage.create_staff(row)

    return {
        "volunteers": len(DEMO_VOLUNTEERS),
        "guests": len(DEMO_GUESTS),
        "staff": len(DEMO_STAFF),
    }


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    storage = build_storage(settings)
    try:
        created = seed(storage)
    finally:
        storage.close()
    logger.info("Seeded demo data: %s", created)
    print(f"✅ Seeded demo data: {created}")


if __name__ == "__main__":
    main()
