"""Timesheet dashboard core - in-memory timesheet data layer"""

__version__ = "1.0.0"
