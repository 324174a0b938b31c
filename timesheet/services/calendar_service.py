"""
Calendar Service - Week number arithmetic.

Weeks follow ISO 8601 numbering: week 1 is the week that contains
January 4th, and every week starts on Monday.
"""

import datetime

from timesheet.domain.models import WeekRange


def get_week_dates(year: int, week_number: int) -> WeekRange:
    """
    Compute the Monday-to-Sunday span of a numbered week.

    Args:
        year: Calendar year the week belongs to
        week_number: Week number, starting at 1

    Returns:
        WeekRange with start_date on a Monday and end_date six days later
    """
    jan4 = datetime.date(year, 1, 4)
    week1_monday = jan4 - datetime.timedelta(days=jan4.weekday())
    start = week1_monday + datetime.timedelta(weeks=week_number - 1)
    return WeekRange(start_date=start, end_date=start + datetime.timedelta(days=6))


class CalendarService:
    """
    Week calendar for a single year.
    Separated from the aggregator so the date logic can be tested alone.
    """

    def __init__(self, year: int):
        self.year = year

    def week_dates(self, week_number: int) -> WeekRange:
        """Start and end date of the given week in this calendar's year"""
        return get_week_dates(self.year, week_number)
