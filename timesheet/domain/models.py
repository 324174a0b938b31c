"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Entries arrive from the presentation layer as loose dictionaries with camelCase
keys (``weekNumber``). Pydantic validates field presence and bounds at the
boundary and serializes back to the same shape, so the rest of the code only
deals with typed objects.
"""

import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


MAX_WEEK_NUMBER = 52


class EntryStatus(str, Enum):
    """Review status of a single timesheet entry."""
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class WeekStatus(str, Enum):
    """Status shown for a whole week, derived from its entries."""
    EMPTY = "Empty"
    APPROVED = "Approved"
    PENDING = "Pending"
    IN_REVIEW = "In Review"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class User(_CamelModel):
    """
    A user allowed to sign in to the dashboard.

    Passwords are stored in plain text; the user list is demo data only.
    """
    id: str
    email: str
    password: str
    name: str

    def to_public(self) -> "PublicUser":
        return PublicUser(id=self.id, email=self.email, name=self.name)


class PublicUser(_CamelModel):
    """User fields that are safe to hand to the presentation layer."""
    id: str
    email: str
    name: str


class AuthResponse(_CamelModel):
    success: bool = True
    user: PublicUser
    token: str


class TimesheetEntryCreate(_CamelModel):
    """
    Fields supplied by the caller when logging new work.

    ``id`` and ``status`` are assigned by the store.
    """
    model_config = ConfigDict(extra="forbid")

    week_number: int = Field(..., ge=1, le=MAX_WEEK_NUMBER)
    date: datetime.date
    hours: int = Field(..., gt=0)
    project: str
    description: str


class TimesheetEntryUpdate(_CamelModel):
    """
    Partial update of an entry. Only fields that were explicitly set are merged.

    ``id`` is not part of this model, so an entry's identity can never change.
    """
    model_config = ConfigDict(extra="forbid")

    week_number: Optional[int] = Field(default=None, ge=1, le=MAX_WEEK_NUMBER)
    date: Optional[datetime.date] = None
    status: Optional[EntryStatus] = None
    hours: Optional[int] = Field(default=None, gt=0)
    project: Optional[str] = None
    description: Optional[str] = None


class TimesheetEntry(_CamelModel):
    """
    A single logged unit of work.

    Examples: 8 hours of "Frontend development" on "Project Alpha"
    """
    id: str
    week_number: int = Field(..., ge=1, le=MAX_WEEK_NUMBER)
    date: datetime.date
    status: EntryStatus = EntryStatus.PENDING
    hours: int = Field(..., gt=0)
    project: str
    description: str


class WeekRange(_CamelModel):
    """Monday to Sunday span of a numbered week."""
    start_date: datetime.date
    end_date: datetime.date


class WeeklyTimesheet(_CamelModel):
    """
    Aggregate of all entries of one week.

    Built fresh by the aggregator on every read and never stored.
    """
    week_number: int
    start_date: datetime.date
    end_date: datetime.date
    total_hours: int = 0
    entries: List[TimesheetEntry] = Field(default_factory=list)
    status: WeekStatus = WeekStatus.EMPTY


class DashboardStats(_CamelModel):
    """Header figures of the dashboard."""
    total_weeks: int = 0
    total_entries: int = 0
    total_hours: int = 0
    pending_count: int = 0


class TimesheetPage(_CamelModel):
    """One page of weekly timesheets."""
    page: int
    per_page: int
    total_pages: int
    total_weeks: int
    weeks: List[WeeklyTimesheet] = Field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
