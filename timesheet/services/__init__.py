"""Services layer - Business logic"""

from .calendar_service import CalendarService, get_week_dates
from .aggregator import TimesheetAggregator, dashboard_stats, derive_week_status, paginate
from .timesheet_service import TimesheetService
from .auth_service import AuthService
from .report_service import ReportService

__all__ = [
    "CalendarService",
    "get_week_dates",
    "TimesheetAggregator",
    "dashboard_stats",
    "derive_week_status",
    "paginate",
    "TimesheetService",
    "AuthService",
    "ReportService",
]
