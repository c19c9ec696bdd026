from __future__ import annotations

from typing import Optional

from sqlmodel import SQLModel, Field

GUEST_REASONS = [
    "wedding",
    "historic",
    "volunteer",
    "donation",
    "other",
]


class Guest(SQLModel, table=True):
    """
    A guest registration. Immutable once written.

    bride_name / groom_name / tour_guide are only filled in for wedding tours.
    """

    __tablename__ = "guests"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(index=True)
    email: str
    phone: Optional[str] = Field(default=None)

    reason: str = Field(index=True)
    join_newsletter: bool = Field(default=False)

    # Wedding tour details
    bride_name: Optional[str] = Field(default=None)
    groom_name: Optional[str] = Field(default=None)
    tour_guide: Optional[str] = Field(default=None)

    date: str
