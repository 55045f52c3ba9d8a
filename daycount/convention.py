"""Abstract interface shared by all day count conventions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class DayCountConvention(ABC):
    """A rule for counting days and year fractions between two dates."""

    @abstractmethod
    def days_between(self, start: date, end: date) -> int:
        """Return the number of days from ``start`` to ``end`` under this convention."""

    @abstractmethod
    def year_fraction(self, start: date, end: date) -> float:
        """Return the fraction of a year from ``start`` to ``end`` under this convention."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"