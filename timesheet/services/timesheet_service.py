"""
Timesheet Service - CRUD operations over the entry store.

Every call waits for a configurable delay before touching the store, so the
presentation layer sees the same timing as it would against a remote backend.
Tests pass zero latency.
"""

import asyncio
import logging
from typing import Dict, List, Optional, Union

from timesheet.domain.models import (
    DashboardStats,
    TimesheetEntry,
    TimesheetEntryCreate,
    TimesheetEntryUpdate,
    TimesheetPage,
    WeeklyTimesheet,
)
from timesheet.infra.config import LatencySettings
from timesheet.infra.repository import EntryStore
from timesheet.services.aggregator import TimesheetAggregator, dashboard_stats, paginate
from timesheet.utils import Delay, simulate_latency

logger = logging.getLogger(__name__)


class TimesheetService:
    """
    Data operations used by the dashboard.

    Reads never fail. update() and delete() raise EntryNotFoundError for
    unknown ids. Mutations are visible to the next read immediately.
    """

    def __init__(self, store: EntryStore, aggregator: TimesheetAggregator,
                 latency: Optional[LatencySettings] = None,
                 delay: Optional[Delay] = None,
                 weeks_per_page: int = 5):
        """
        Initialize the service.

        Args:
            store: Shared entry store
            aggregator: Builds weekly summaries from the same store
            latency: Per-operation delay in seconds (defaults to LatencySettings())
            delay: Coroutine used to wait, asyncio.sleep by default
            weeks_per_page: Page size for get_page()
        """
        self.store = store
        self.aggregator = aggregator
        self.latency = latency if latency is not None else LatencySettings()
        self.delay = delay if delay is not None else asyncio.sleep
        self.weeks_per_page = weeks_per_page

    async def _wait(self, seconds: float) -> None:
        await simulate_latency(self.delay, seconds)

    async def list_all(self) -> List[TimesheetEntry]:
        """Snapshot of every entry"""
        await self._wait(self.latency.read)
        return await self.store.all()

    async def list_weekly_timesheets(self) -> List[WeeklyTimesheet]:
        """Weekly summaries rebuilt from the current entries"""
        await self._wait(self.latency.read)
        return await self.aggregator.build_weekly_timesheets()

    async def list_by_week(self, week_number: int) -> List[TimesheetEntry]:
        """Entries of a single week, empty if there are none"""
        await self._wait(self.latency.read)
        return await self.store.by_week(week_number)

    async def get_page(self, page: int = 1) -> TimesheetPage:
        weeks = await self.list_weekly_timesheets()
        return paginate(weeks, page, self.weeks_per_page)

    async def get_stats(self) -> DashboardStats:
        weeks = await self.list_weekly_timesheets()
        return dashboard_stats(weeks)

    async def create(self, entry: Union[TimesheetEntryCreate, Dict]) -> TimesheetEntry:
        """
        Log new work. The entry gets a fresh id and Pending status.

        Args:
            entry: Entry fields without id and status

        Returns:
            The stored entry
        """
        if not isinstance(entry, TimesheetEntryCreate):
            entry = TimesheetEntryCreate.model_validate(entry)

        await self._wait(self.latency.create)
        return await self.store.insert(entry)

    async def update(self, entry_id: str,
                     changes: Union[TimesheetEntryUpdate, Dict]) -> TimesheetEntry:
        """
        Merge changes into an existing entry.

        Raises:
            EntryNotFoundError: if no entry has this id
        """
        if not isinstance(changes, TimesheetEntryUpdate):
            changes = TimesheetEntryUpdate.model_validate(changes)

        await self._wait(self.latency.update)
        return await self.store.update(entry_id, changes)

    async def delete(self, entry_id: str) -> None:
        """
        Remove an entry.

        Raises:
            EntryNotFoundError: if no entry has this id
        """
        await self._wait(self.latency.delete)
        await self.store.delete(entry_id)
