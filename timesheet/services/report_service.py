"""
Report Generation Service using Jinja2 templates.

Architecture Decision: Template Pattern
The dashboard's table and list views are plain templates, so the layout can
change without touching the aggregation code.
"""

import datetime
from pathlib import Path
from typing import Optional
from jinja2 import Environment, FileSystemLoader

from timesheet.domain.models import DashboardStats, TimesheetPage
from timesheet.utils import get_resource_path

VIEW_TEMPLATES = {
    "table": "weekly_table.txt",
    "list": "weekly_list.txt",
}


class ReportService:
    """
    Renders pages of weekly timesheets as text.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize the report service.

        Args:
            template_dir: Directory containing Jinja2 templates
        """
        if template_dir is None:
            template_dir = get_resource_path("resources/templates")

        self.template_dir = template_dir

        # Setup Jinja2 environment
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            trim_blocks=True,
            lstrip_blocks=True
        )

        # Add custom filters
        self.env.filters['format_date'] = self._format_date
        self.env.filters['format_range'] = self._format_range
        self.env.filters['format_hours'] = self._format_hours

    @staticmethod
    def _format_date(value: datetime.date, fmt: str = "%d %B, %Y") -> str:
        """Format date object"""
        return value.strftime(fmt)

    @staticmethod
    def _format_range(week) -> str:
        """Format a week as '1 - 5 January, 2025'"""
        start, end = week.start_date, week.end_date
        if start.year != end.year:
            return f"{start.strftime('%d %B, %Y')} - {end.strftime('%d %B, %Y')}"
        if start.month != end.month:
            return f"{start.day} {start.strftime('%B')} - {end.day} {end.strftime('%B, %Y')}"
        return f"{start.day} - {end.day} {end.strftime('%B, %Y')}"

    @staticmethod
    def _format_hours(hours: int) -> str:
        return f"{hours} hr" if hours == 1 else f"{hours} hrs"

    def render_page(self, page: TimesheetPage, stats: Optional[DashboardStats] = None,
                    view: str = "table", user_name: Optional[str] = None) -> str:
        """
        Render one dashboard page.

        Args:
            page: Page of weekly timesheets
            stats: Optional header figures
            view: 'table' or 'list'
            user_name: Name shown in the header

        Returns:
            The rendered page as a string
        """
        if view not in VIEW_TEMPLATES:
            raise ValueError(f"Unknown view mode: {view}")

        template = self.env.get_template(VIEW_TEMPLATES[view])
        return template.render(
            page=page,
            stats=stats,
            user_name=user_name,
            generated_at=datetime.datetime.now(),
        )
