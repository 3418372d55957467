"""Income earned per calendar year from a start month up to the present."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SimpleDate:
    """A month of a year."""

    month: int
    year: int

    @classmethod
    def today(cls) -> "SimpleDate":
        now = datetime.date.today()
        return cls(now.month, now.year)


@dataclass(frozen=True)
class Income:
    year: int
    amount: int


class IncomeCalculator:
    """Income per year from ``start`` up to, not including, the current month."""

    def __init__(
        self, start: SimpleDate, base_salary: int, today: Optional[SimpleDate] = None
    ) -> None:
        self.start = start
        self.base_salary = base_salary
        self.today = today

    def calculate(self) -> list[Income]:
        """Return one entry per year in which at least one month was worked."""
        today = self.today or SimpleDate.today()
        monthly = self.base_salary // 12
        incomes: list[Income] = []
        for year in range(self.start.year, today.year + 1):
            first = self.start.month if year == self.start.year else 1
            last = today.month - 1 if year == today.year else 12
            months = last - first + 1
            if months > 0:
                incomes.append(Income(year, monthly * months))
        return incomes


def calculate_income(start: SimpleDate, base_salary: int, today: SimpleDate) -> list[Income]:
    """Return an entry for every year from ``start.year`` to ``today.year``.

    In the current year only the months before ``today.month`` count, whatever
    the start month was.
    """
    monthly = base_salary // 12
    incomes: list[Income] = []
    for year in range(start.year, today.year + 1):
        months = 12
        if year == start.year:
            months -= start.month - 1
        if year == today.year:
            months = today.month - 1
        incomes.append(Income(year, months * monthly))
    return incomes