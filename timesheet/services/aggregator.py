"""
Aggregator - Builds weekly summaries from the entry store.

Summaries are recomputed on every call. The store is small, so reading it
again is cheaper than keeping a cache in sync with every mutation.
"""

import logging
import math
from typing import List, Sequence

from timesheet.domain.models import (
    MAX_WEEK_NUMBER,
    DashboardStats,
    EntryStatus,
    TimesheetEntry,
    TimesheetPage,
    WeeklyTimesheet,
    WeekStatus,
)
from timesheet.infra.repository import EntryStore
from timesheet.services.calendar_service import CalendarService

logger = logging.getLogger(__name__)


def derive_week_status(entries: Sequence[TimesheetEntry]) -> WeekStatus:
    """
    Status of a week from the statuses of its entries.

    Precedence: all Approved, then any Pending, then any Rejected.
    """
    if not entries:
        return WeekStatus.EMPTY

    statuses = [e.status for e in entries]
    if all(s == EntryStatus.APPROVED for s in statuses):
        return WeekStatus.APPROVED
    if EntryStatus.PENDING in statuses:
        return WeekStatus.PENDING
    if EntryStatus.REJECTED in statuses:
        return WeekStatus.IN_REVIEW
    return WeekStatus.EMPTY


def dashboard_stats(weeks: Sequence[WeeklyTimesheet]) -> DashboardStats:
    """Totals shown above the weekly table"""
    return DashboardStats(
        total_weeks=len(weeks),
        total_entries=sum(len(w.entries) for w in weeks),
        total_hours=sum(w.total_hours for w in weeks),
        pending_count=sum(
            1 for w in weeks for e in w.entries if e.status == EntryStatus.PENDING
        ),
    )


def paginate(weeks: Sequence[WeeklyTimesheet], page: int, per_page: int = 5) -> TimesheetPage:
    """
    Slice weeks into a page.

    Pages outside 1..total_pages are clamped to the nearest valid page.
    """
    if per_page < 1:
        raise ValueError("per_page must be at least 1")

    total_pages = math.ceil(len(weeks) / per_page)
    page = min(max(page, 1), max(total_pages, 1))
    start = (page - 1) * per_page

    return TimesheetPage(
        page=page,
        per_page=per_page,
        total_pages=total_pages,
        total_weeks=len(weeks),
        weeks=list(weeks[start:start + per_page]),
    )


class TimesheetAggregator:
    """
    Produces one WeeklyTimesheet per week number from the current store contents.
    """

    def __init__(self, store: EntryStore, calendar: CalendarService):
        self.store = store
        self.calendar = calendar

    def build_from_entries(self, entries: Sequence[TimesheetEntry]) -> List[WeeklyTimesheet]:
        """Group a snapshot of entries into weekly summaries"""
        weekly_sheets = []

        for week in range(1, MAX_WEEK_NUMBER + 1):
            week_range = self.calendar.week_dates(week)
            week_entries = [e for e in entries if e.week_number == week]

            weekly_sheets.append(WeeklyTimesheet(
                week_number=week,
                start_date=week_range.start_date,
                end_date=week_range.end_date,
                total_hours=sum(e.hours for e in week_entries),
                entries=week_entries,
                status=derive_week_status(week_entries),
            ))

        return weekly_sheets

    async def build_weekly_timesheets(self) -> List[WeeklyTimesheet]:
        """Rebuild all weekly summaries from the store"""
        entries = await self.store.all()
        logger.debug(f"Aggregating {len(entries)} entries into {MAX_WEEK_NUMBER} weeks")
        return self.build_from_entries(entries)

    async def build_week(self, week_number: int) -> WeeklyTimesheet:
        """Summary of a single week"""
        entries = await self.store.by_week(week_number)
        week_range = self.calendar.week_dates(week_number)
        return WeeklyTimesheet(
            week_number=week_number,
            start_date=week_range.start_date,
            end_date=week_range.end_date,
            total_hours=sum(e.hours for e in entries),
            entries=entries,
            status=derive_week_status(entries),
        )
