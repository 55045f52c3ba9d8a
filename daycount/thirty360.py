"""30/360 (Bond Basis) day count convention, ISDA 2006 Section 4.16(f)."""

from __future__ import annotations

from datetime import date

from .convention import DayCountConvention


class Thirty360(DayCountConvention):
    """30/360 (Bond Basis).

    Days are ``360*(Y2-Y1) + 30*(M2-M1) + (D2-D1)``, where D1 is capped at 30,
    and D2 is capped at 30 when D1 is greater than 29.
    """

    def days_between(self, start: date, end: date) -> int:
        """Return the 30/360 day count from ``start`` to ``end``."""
        d1 = min(start.day, 30)
        d2 = end.day
        if d1 > 29:
            d2 = min(d2, 30)
        return (
            (end.year - start.year) * 360
            + (end.month - start.month) * 30
            + (d2 - d1)
        )

    def year_fraction(self, start: date, end: date) -> float:
        """Return the 30/360 day count divided by 360."""
        return self.days_between(start, end) / 360.0