#!/usr/bin/env python

"""
Timesheet Dashboard - Demo Entry Point

Seeds a year of random timesheet data, signs in with the demo admin account
and prints the first page of weekly timesheets.

Usage:
    python main.py [page] [table|list]

Requirements:
    - Python 3.10+
    - See pyproject.toml for dependencies
"""

import asyncio
import logging
import sys
from typing import List, Tuple

from timesheet.app import TimesheetApp
from timesheet.infra.config import get_settings
from timesheet.services.aggregator import dashboard_stats, paginate
from timesheet.services.report_service import VIEW_TEMPLATES


async def run(page: int, view: str) -> int:
    settings = get_settings()
    app = await TimesheetApp.create(settings)

    session = await app.auth.login("admin@tentwenty.com", "admin123")
    weeks = await app.timesheets.list_weekly_timesheets()

    print(app.reports.render_page(
        paginate(weeks, page, settings.weeks_per_page),
        stats=dashboard_stats(weeks),
        view=view,
        user_name=session.user.name,
    ))

    await app.auth.logout()
    return 0


USAGE = "Usage: python main.py [page] [table|list]"


def parse_args(argv: List[str]) -> Tuple[int, str]:
    """
    Read the optional page number and view mode.

    Raises:
        ValueError: if the page is not a number or the view is unknown
    """
    page = int(argv[0]) if len(argv) > 0 else 1
    view = argv[1] if len(argv) > 1 else "table"
    if view not in VIEW_TEMPLATES:
        raise ValueError(f"Unknown view mode: {view}")
    return page, view


def main():
    """Main entry point"""
    try:
        page, view = parse_args(sys.argv[1:])
    except ValueError:
        print(USAGE, file=sys.stderr)
        return 2

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    return asyncio.run(run(page, view))


if __name__ == "__main__":
    sys.exit(main())
