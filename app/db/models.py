"""Shapes of the two persisted JSON documents.

Field names are camelCase because they are written to disk and served to the
browser as-is.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class Volunteer(BaseModel):
    id: str
    name: str
    email: str
    phone: str = ""
    notes: str = ""
    signupTime: str


class LedgerEntry(Volunteer):
    """Flat copy of a signup kept in volunteers.json for reporting."""

    taskId: str
    taskName: str


class Task(BaseModel):
    id: str
    name: str
    needed: int = Field(0, ge=0)
    volunteers: List[Volunteer] = Field(default_factory=list)


class Event(BaseModel):
    id: str
    name: str
    date: str
    time: str
    description: str = ""
    organizerEmail: Optional[str] = None
    tasks: List[Task] = Field(default_factory=list)
