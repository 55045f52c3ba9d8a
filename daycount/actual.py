"""Actual/360 and Actual/365 (Fixed) day count conventions."""

from __future__ import annotations

from datetime import date

from .convention import DayCountConvention


def _calendar_days(start: date, end: date) -> int:
    return (end - start).days


class Actual360(DayCountConvention):
    """Actual/360: calendar days over a 360-day year."""

    def days_between(self, start: date, end: date) -> int:
        """Return the number of calendar days from ``start`` to ``end``."""
        return _calendar_days(start, end)

    def year_fraction(self, start: date, end: date) -> float:
        """Return the calendar days divided by 360."""
        return self.days_between(start, end) / 360.0


class Actual365Fixed(DayCountConvention):
    """Actual/365 (Fixed): calendar days over a 365-day year."""

    def days_between(self, start: date, end: date) -> int:
        """Return the number of calendar days from ``start`` to ``end``."""
        return _calendar_days(start, end)

    def year_fraction(self, start: date, end: date) -> float:
        """Return the calendar days divided by 365."""
        return self.days_between(start, end) / 365.0