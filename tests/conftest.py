"""
Pytest configuration and fixtures.
"""

import sys
import random
from pathlib import Path
import pytest
import pytest_asyncio

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from timesheet.infra.config import LatencySettings, Settings
from timesheet.infra.repository import EntryStore, UserRepository
from timesheet.infra.seed import SeedGenerator
from timesheet.services.aggregator import TimesheetAggregator
from timesheet.services.auth_service import AuthService
from timesheet.services.calendar_service import CalendarService
from timesheet.services.timesheet_service import TimesheetService


@pytest.fixture
def settings(tmp_path):
    """Settings with no simulated latency and no YAML file"""
    return Settings(config_file=tmp_path / "missing.yaml", latency=LatencySettings.zero(), seed=1234)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    """An empty store"""
    return EntryStore()


@pytest_asyncio.fixture
async def seeded_store(rng):
    """A store filled with deterministic seed data for 2025"""
    store = EntryStore()
    await SeedGenerator(2025, rng=rng).seed(store)
    return store


@pytest.fixture
def calendar():
    return CalendarService(2025)


@pytest.fixture
def aggregator(seeded_store, calendar):
    return TimesheetAggregator(seeded_store, calendar)


@pytest.fixture
def service(seeded_store, aggregator):
    return TimesheetService(seeded_store, aggregator, latency=LatencySettings.zero())


@pytest.fixture
def empty_service(store, calendar):
    return TimesheetService(store, TimesheetAggregator(store, calendar), latency=LatencySettings.zero())


@pytest.fixture
def auth():
    return AuthService(UserRepository(), latency=LatencySettings.zero())
