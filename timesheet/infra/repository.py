"""
Repository Pattern Implementation.

Architecture Decision: Why Repository Pattern?
Separates data access logic from business logic. Makes it easy to:
- Swap the in-memory store for a real backend later
- Seed deterministic data in tests
- Keep the services free of list bookkeeping

All data lives in process memory. Nothing is written to disk.
"""

import asyncio
import logging
import uuid
from typing import Dict, Iterable, List, Optional, Union

from timesheet.domain.exceptions import EntryNotFoundError
from timesheet.domain.models import (
    EntryStatus,
    TimesheetEntry,
    TimesheetEntryCreate,
    TimesheetEntryUpdate,
    User,
)

logger = logging.getLogger(__name__)


DEFAULT_USERS = [
    User(id="1", email="admin@tentwenty.com", password="admin123", name="Admin User"),
    User(id="2", email="developer@tentwenty.com", password="dev123", name="Developer User"),
]


class UserRepository:
    """
    Read-only list of users allowed to sign in.
    """

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: List[User] = list(DEFAULT_USERS if users is None else users)

    def find_by_credentials(self, email: str, password: str) -> Optional[User]:
        """Return the user whose email and password match exactly, if any"""
        for user in self._users:
            if user.email == email and user.password == password:
                return user
        return None

    def get_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def get_all(self) -> List[User]:
        return [u.model_copy() for u in self._users]


class EntryStore:
    """
    The authoritative collection of timesheet entries.

    Created once at startup and handed to every service that needs it.
    Entries keep insertion order. Every read and mutation runs under a single
    lock, and callers always receive copies, never the stored objects.
    """

    def __init__(self, entries: Optional[Iterable[TimesheetEntry]] = None):
        self._entries: List[TimesheetEntry] = []
        self._lock = asyncio.Lock()
        self.revision = 0
        for entry in entries or ():
            self._append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def _append(self, entry: TimesheetEntry) -> None:
        if self._index_of(entry.id) is not None:
            raise ValueError(f"Duplicate entry id: {entry.id}")
        self._entries.append(entry.model_copy())

    def _index_of(self, entry_id: str) -> Optional[int]:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return None

    def _new_id(self) -> str:
        while True:
            entry_id = f"new-{uuid.uuid4().hex}"
            if self._index_of(entry_id) is None:
                return entry_id

    async def add(self, entry: TimesheetEntry) -> TimesheetEntry:
        """Store a fully formed entry as is (used for seeding)"""
        async with self._lock:
            self._append(entry)
            self.revision += 1
            return entry.model_copy()

    async def all(self) -> List[TimesheetEntry]:
        """Snapshot of every entry in store order"""
        async with self._lock:
            return [e.model_copy() for e in self._entries]

    async def by_week(self, week_number: int) -> List[TimesheetEntry]:
        """Entries of one week in store order"""
        async with self._lock:
            return [e.model_copy() for e in self._entries if e.week_number == week_number]

    async def get(self, entry_id: str) -> TimesheetEntry:
        async with self._lock:
            index = self._index_of(entry_id)
            if index is None:
                raise EntryNotFoundError(entry_id)
            return self._entries[index].model_copy()

    async def insert(self, fields: TimesheetEntryCreate) -> TimesheetEntry:
        """Append a new entry with a fresh id and Pending status"""
        async with self._lock:
            entry = TimesheetEntry(
                id=self._new_id(),
                status=EntryStatus.PENDING,
                **fields.model_dump(),
            )
            self._entries.append(entry)
            self.revision += 1
            logger.info(f"Entry created: {entry.id} (week {entry.week_number}, {entry.hours}h)")
            return entry.model_copy()

    async def update(self, entry_id: str,
                     changes: Union[TimesheetEntryUpdate, Dict]) -> TimesheetEntry:
        """
        Merge the supplied fields into an existing entry.

        Args:
            entry_id: Id of the entry to change
            changes: Fields to overwrite; anything not supplied is kept

        Returns:
            The entry after the update

        Raises:
            EntryNotFoundError: no entry has this id; the store is left untouched
        """
        if not isinstance(changes, TimesheetEntryUpdate):
            changes = TimesheetEntryUpdate.model_validate(changes)
        updates = changes.model_dump(exclude_unset=True, exclude_none=True)

        async with self._lock:
            index = self._index_of(entry_id)
            if index is None:
                logger.warning(f"Update of unknown entry {entry_id}")
                raise EntryNotFoundError(entry_id)

            merged = TimesheetEntry.model_validate(
                {**self._entries[index].model_dump(), **updates}
            )
            self._entries[index] = merged
            self.revision += 1
            logger.info(f"Entry updated: {entry_id} {sorted(updates)}")
            return merged.model_copy()

    async def delete(self, entry_id: str) -> None:
        """Remove an entry. Raises EntryNotFoundError if it does not exist."""
        async with self._lock:
            index = self._index_of(entry_id)
            if index is None:
                logger.warning(f"Delete of unknown entry {entry_id}")
                raise EntryNotFoundError(entry_id)
            del self._entries[index]
            self.revision += 1
            logger.info(f"Entry deleted: {entry_id}")
