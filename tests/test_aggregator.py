"""
Tests for weekly aggregation, week status precedence, stats and pagination.
"""

import datetime
import pytest

from timesheet.domain.models import EntryStatus, TimesheetEntry, WeekStatus
from timesheet.services.aggregator import (
    TimesheetAggregator,
    dashboard_stats,
    derive_week_status,
    paginate,
)


def entry(status: EntryStatus, entry_id: str = "1", hours: int = 1) -> TimesheetEntry:
    return TimesheetEntry(id=entry_id, week_number=1, date="2025-01-01", status=status,
                          hours=hours, project="P", description="D")


class TestDeriveWeekStatus:

    def test_no_entries_is_empty(self):
        assert derive_week_status([]) == WeekStatus.EMPTY

    def test_all_approved(self):
        entries = [entry(EntryStatus.APPROVED, "1"), entry(EntryStatus.APPROVED, "2")]
        assert derive_week_status(entries) == WeekStatus.APPROVED

    def test_pending_wins_over_rejected(self):
        entries = [entry(EntryStatus.REJECTED, "1"), entry(EntryStatus.PENDING, "2")]
        assert derive_week_status(entries) == WeekStatus.PENDING

    def test_pending_wins_over_approved(self):
        entries = [entry(EntryStatus.APPROVED, "1"), entry(EntryStatus.PENDING, "2")]
        assert derive_week_status(entries) == WeekStatus.PENDING

    def test_rejected_without_pending_is_in_review(self):
        entries = [entry(EntryStatus.APPROVED, "1"), entry(EntryStatus.REJECTED, "2")]
        assert derive_week_status(entries) == WeekStatus.IN_REVIEW

    def test_in_review_label(self):
        assert WeekStatus.IN_REVIEW.value == "In Review"


class TestTimesheetAggregator:

    @pytest.mark.asyncio
    async def test_one_summary_per_week(self, aggregator):
        weeks = await aggregator.build_weekly_timesheets()
        assert [w.week_number for w in weeks] == list(range(1, 53))

    @pytest.mark.asyncio
    async def test_dates_span_six_days(self, aggregator):
        for week in await aggregator.build_weekly_timesheets():
            assert week.start_date < week.end_date
            assert week.end_date - week.start_date == datetime.timedelta(days=6)

    @pytest.mark.asyncio
    async def test_total_hours_matches_entries(self, aggregator):
        for week in await aggregator.build_weekly_timesheets():
            assert week.total_hours == sum(e.hours for e in week.entries)

    @pytest.mark.asyncio
    async def test_entries_belong_to_their_week_in_store_order(self, aggregator, seeded_store):
        all_ids = [e.id for e in await seeded_store.all()]
        for week in await aggregator.build_weekly_timesheets():
            assert all(e.week_number == week.week_number for e in week.entries)
            ids = [e.id for e in week.entries]
            assert ids == sorted(ids, key=all_ids.index)

    @pytest.mark.asyncio
    async def test_every_entry_appears_once(self, aggregator, seeded_store):
        weeks = await aggregator.build_weekly_timesheets()
        aggregated = [e.id for w in weeks for e in w.entries]
        assert sorted(aggregated) == sorted(e.id for e in await seeded_store.all())

    @pytest.mark.asyncio
    async def test_idempotent_without_mutation(self, aggregator):
        assert await aggregator.build_weekly_timesheets() == await aggregator.build_weekly_timesheets()

    @pytest.mark.asyncio
    async def test_status_follows_precedence(self, aggregator):
        for week in await aggregator.build_weekly_timesheets():
            assert week.status == derive_week_status(week.entries)

    @pytest.mark.asyncio
    async def test_empty_store(self, store, calendar):
        weeks = await TimesheetAggregator(store, calendar).build_weekly_timesheets()
        assert len(weeks) == 52
        assert all(w.total_hours == 0 and w.entries == [] for w in weeks)
        assert all(w.status == WeekStatus.EMPTY for w in weeks)

    @pytest.mark.asyncio
    async def test_build_week(self, aggregator):
        weeks = await aggregator.build_weekly_timesheets()
        assert await aggregator.build_week(10) == weeks[9]


class TestDashboardStats:

    @pytest.mark.asyncio
    async def test_totals(self, aggregator, seeded_store):
        weeks = await aggregator.build_weekly_timesheets()
        entries = await seeded_store.all()
        stats = dashboard_stats(weeks)
        assert stats.total_weeks == 52
        assert stats.total_entries == len(entries)
        assert stats.total_hours == sum(e.hours for e in entries)
        assert stats.pending_count == sum(1 for e in entries if e.status == EntryStatus.PENDING)


class TestPaginate:

    @pytest.mark.asyncio
    async def test_first_page(self, aggregator):
        page = paginate(await aggregator.build_weekly_timesheets(), 1)
        assert page.total_pages == 11
        assert [w.week_number for w in page.weeks] == [1, 2, 3, 4, 5]
        assert not page.has_previous
        assert page.has_next

    @pytest.mark.asyncio
    async def test_last_page_is_partial(self, aggregator):
        page = paginate(await aggregator.build_weekly_timesheets(), 11)
        assert [w.week_number for w in page.weeks] == [51, 52]
        assert not page.has_next

    @pytest.mark.asyncio
    async def test_out_of_range_is_clamped(self, aggregator):
        weeks = await aggregator.build_weekly_timesheets()
        assert paginate(weeks, 0).page == 1
        assert paginate(weeks, 99).page == 11

    def test_no_weeks(self):
        page = paginate([], 3)
        assert page.page == 1
        assert page.total_pages == 0
        assert page.weeks == []

    def test_invalid_page_size(self):
        with pytest.raises(ValueError):
            paginate([], 1, per_page=0)
