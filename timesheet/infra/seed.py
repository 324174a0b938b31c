"""
Data Seeder for the in-memory store.
Populates every week of a year with a handful of random entries for demo purposes.
"""

import datetime
import logging
import random
from typing import List, Optional

from timesheet.domain.models import EntryStatus, TimesheetEntry
from timesheet.infra.repository import EntryStore
from timesheet.services.calendar_service import get_week_dates

logger = logging.getLogger(__name__)


PROJECTS = ["Project Alpha", "Project Beta", "Project Gamma", "Project Delta", "Project Epsilon"]
DESCRIPTIONS = [
    "Frontend development",
    "API integration",
    "Code review",
    "Bug fixes",
    "Testing",
    "Database optimization",
    "UI/UX improvements",
    "Documentation",
    "Meeting with client",
]
STATUSES = [EntryStatus.PENDING, EntryStatus.APPROVED, EntryStatus.REJECTED]

MIN_ENTRIES_PER_WEEK = 1
MAX_ENTRIES_PER_WEEK = 5
MIN_HOURS = 1
MAX_HOURS = 8


class SeedGenerator:
    """
    Generates random timesheet entries week by week.

    Pass a seeded ``random.Random`` (or a seed) to get the same data on every run.
    Statuses are picked per entry and are not coordinated within a week.
    """

    def __init__(self, year: int, weeks: int = 52,
                 rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.year = year
        self.weeks = weeks
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self) -> List[TimesheetEntry]:
        entries = []
        next_id = 1

        for week in range(1, self.weeks + 1):
            start_date = get_week_dates(self.year, week).start_date
            count = self.rng.randint(MIN_ENTRIES_PER_WEEK, MAX_ENTRIES_PER_WEEK)

            for _ in range(count):
                entries.append(TimesheetEntry(
                    id=str(next_id),
                    week_number=week,
                    date=start_date + datetime.timedelta(days=self.rng.randint(0, 6)),
                    status=self.rng.choice(STATUSES),
                    hours=self.rng.randint(MIN_HOURS, MAX_HOURS),
                    project=self.rng.choice(PROJECTS),
                    description=self.rng.choice(DESCRIPTIONS),
                ))
                next_id += 1

        return entries

    async def seed(self, store: EntryStore) -> int:
        """
        Add generated entries to a store.

        Returns:
            Number of entries added
        """
        entries = self.generate()
        for entry in entries:
            await store.add(entry)
        logger.info(f"Seeded {len(entries)} entries across {self.weeks} weeks of {self.year}")
        return len(entries)
