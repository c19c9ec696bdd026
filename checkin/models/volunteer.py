from __future__ import annotations

from typing import Dict, List, Optional

from sqlmodel import SQLModel, Field

# Work areas shown on the check-in screen, with suggested activities per area.
VOLUNTEER_AREAS: Dict[str, List[str]] = {
    "firstFloor": [
        "Kitchen prep",
        "Dining setup",
        "Reception desk",
        "Tour guide",
        "Event coordination",
        "Cleaning",
        "Gift shop",
        "Photography",
    ],
    "secondFloor": [
        "Room preparation",
        "Bed making",
        "Bathroom cleaning",
        "Laundry",
        "Maintenance check",
        "Decoration",
        "Window cleaning",
        "Inventory",
    ],
    "garden": [
        "Watering plants",
        "Weeding",
        "Planting",
        "Pruning",
        "Harvesting",
        "Mulching",
        "Composting",
        "Path maintenance",
    ],
    "maintenance": [
        "Painting",
        "Repair work",
        "Electrical",
        "Plumbing",
        "HVAC check",
        "Carpentry",
        "Groundskeeping",
        "Equipment maintenance",
    ],
}


class Volunteer(SQLModel, table=True):
    """
    One volunteer check-in.

    Repeat visits are separate rows; only the name is shared.
    date / time_in / time_out are the client's locale-formatted text.
    """

    __tablename__ = "volunteers"
    # never hand out an id again after its row was deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(index=True)
    date: str
    time_in: str
    # no check-out flow exists yet
    time_out: Optional[str] = Field(default=None)

    area: str = Field(index=True)
    activities: str
