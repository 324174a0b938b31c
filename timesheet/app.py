"""
Application wiring.

Builds the entry store once and hands the same instance to every service.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from timesheet.infra.config import Settings, get_settings
from timesheet.infra.repository import EntryStore, UserRepository
from timesheet.infra.seed import SeedGenerator
from timesheet.services.aggregator import TimesheetAggregator
from timesheet.services.auth_service import AuthService
from timesheet.services.calendar_service import CalendarService
from timesheet.services.report_service import ReportService
from timesheet.services.timesheet_service import TimesheetService

logger = logging.getLogger(__name__)


@dataclass
class TimesheetApp:
    settings: Settings
    store: EntryStore
    calendar: CalendarService
    aggregator: TimesheetAggregator
    timesheets: TimesheetService
    auth: AuthService
    reports: ReportService

    @classmethod
    async def create(cls, settings: Optional[Settings] = None,
                     rng: Optional[random.Random] = None,
                     seed_data: bool = True) -> "TimesheetApp":
        """
        Build and seed a complete application.

        Args:
            settings: Settings to use, the global settings by default
            rng: Random source for seed data; falls back to settings.seed
            seed_data: Fill the store with generated entries
        """
        settings = settings if settings is not None else get_settings()

        store = EntryStore()
        if seed_data:
            generator = SeedGenerator(settings.year, settings.weeks, rng=rng, seed=settings.seed)
            await generator.seed(store)

        calendar = CalendarService(settings.year)
        aggregator = TimesheetAggregator(store, calendar)

        logger.info(f"{settings.app_name} ready with {len(store)} entries")
        return cls(
            settings=settings,
            store=store,
            calendar=calendar,
            aggregator=aggregator,
            timesheets=TimesheetService(
                store, aggregator,
                latency=settings.latency,
                weeks_per_page=settings.weeks_per_page,
            ),
            auth=AuthService(UserRepository(), latency=settings.latency),
            reports=ReportService(),
        )
