"""Domain layer - Pure business entities and errors"""

from .models import (
    AuthResponse,
    DashboardStats,
    EntryStatus,
    PublicUser,
    TimesheetEntry,
    TimesheetEntryCreate,
    TimesheetEntryUpdate,
    TimesheetPage,
    User,
    WeeklyTimesheet,
    WeekRange,
    WeekStatus,
)
from .exceptions import EntryNotFoundError, InvalidCredentialsError, TimesheetError

__all__ = [
    "AuthResponse",
    "DashboardStats",
    "EntryStatus",
    "PublicUser",
    "TimesheetEntry",
    "TimesheetEntryCreate",
    "TimesheetEntryUpdate",
    "TimesheetPage",
    "User",
    "WeeklyTimesheet",
    "WeekRange",
    "WeekStatus",
    "EntryNotFoundError",
    "InvalidCredentialsError",
    "TimesheetError",
]
