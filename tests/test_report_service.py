"""
Tests for rendering dashboard pages and wiring the application.
"""

import pytest

from timesheet.app import TimesheetApp
from timesheet.infra.config import LatencySettings, Settings
from timesheet.services.aggregator import dashboard_stats, paginate
from timesheet.services.report_service import ReportService


@pytest.mark.asyncio
async def test_table_view(aggregator):
    weeks = await aggregator.build_weekly_timesheets()
    output = ReportService().render_page(paginate(weeks, 1), stats=dashboard_stats(weeks),
                                         view="table", user_name="Admin User")

    assert "Timesheet - Admin User" in output
    assert "30 December, 2024 - 05 January, 2025" in output
    assert "Page 1 of 11" in output
    assert "next: 2" in output
    assert weeks[0].status.value in output


@pytest.mark.asyncio
async def test_list_view_shows_entries(aggregator):
    weeks = await aggregator.build_weekly_timesheets()
    output = ReportService().render_page(paginate(weeks, 2), view="list")

    assert "Week 6:" in output
    for entry in weeks[5].entries:
        assert entry.project in output


@pytest.mark.asyncio
async def test_empty_week_in_list_view(empty_service):
    weeks = await empty_service.list_weekly_timesheets()
    output = ReportService().render_page(paginate(weeks, 2), view="list")
    assert "No entries" in output
    assert "[Empty]" in output


def test_unknown_view():
    with pytest.raises(ValueError):
        ReportService().render_page(paginate([], 1), view="grid")


@pytest.mark.asyncio
async def test_app_wiring(settings, rng):
    app = await TimesheetApp.create(settings, rng=rng)

    assert len(app.store) > 0
    session = await app.auth.login("admin@tentwenty.com", "admin123")
    created = await app.timesheets.create({
        "weekNumber": 7, "date": "2025-02-13", "hours": 5, "project": "X", "description": "Y",
    })
    week = await app.aggregator.build_week(7)
    assert created.id in {e.id for e in week.entries}
    assert session.user.name == "Admin User"


@pytest.mark.asyncio
async def test_app_without_seed_data(settings):
    app = await TimesheetApp.create(settings, seed_data=False)
    assert len(app.store) == 0


@pytest.mark.asyncio
async def test_short_seed_still_summarises_every_week(tmp_path, rng):
    settings = Settings(config_file=tmp_path / "missing.yaml", latency=LatencySettings.zero(), weeks=4)
    app = await TimesheetApp.create(settings, rng=rng)

    assert {e.week_number for e in await app.store.all()} == {1, 2, 3, 4}

    created = await app.timesheets.create({
        "weekNumber": 7, "date": "2025-02-13", "hours": 5, "project": "X", "description": "Y",
    })
    weeks = await app.timesheets.list_weekly_timesheets()

    assert len(weeks) == 52
    assert [e.id for e in weeks[6].entries] == [created.id]
