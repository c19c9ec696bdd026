from __future__ import annotations

from typing import Optional

from sqlmodel import SQLModel, Field


class Staff(SQLModel, table=True):
    """
    One employee clock event.

    Clock-in and clock-out are written as two separate rows (one with time_in,
    one with time_out). They are correlated only by name and date.
    """

    __tablename__ = "staff"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(index=True)
    date: str
    time_in: Optional[str] = Field(default=None)
    time_out: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)
