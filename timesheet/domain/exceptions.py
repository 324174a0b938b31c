"""Errors raised by the timesheet core."""

from typing import Optional


class TimesheetError(Exception):
    """Base class for all timesheet errors"""


class EntryNotFoundError(TimesheetError, LookupError):
    """No entry with the given id exists in the store."""

    def __init__(self, entry_id: str, message: Optional[str] = None):
        self.entry_id = entry_id
        super().__init__(message or "Entry not found")


class InvalidCredentialsError(TimesheetError):
    """Email and password did not match any user."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
