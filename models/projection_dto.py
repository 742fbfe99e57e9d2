from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from models.transaction import Transaction


@dataclass(frozen=True)
class CalculationResult:
    """One forecast day."""
    date: date
    cash_flow: float
    balance: float


@dataclass
class ForecastResult:
    start_date: date
    end_date: date
    starting_balance: float
    timeline: List[CalculationResult] = field(default_factory=list)
    months: Optional[int] = None  # horizon length when built from a month count

    @property
    def final_balance(self) -> float:
        if not self.timeline:
            return self.starting_balance
        return self.timeline[-1].balance

    @property
    def total_cash_flow(self) -> float:
        return sum(day.cash_flow for day in self.timeline)


@dataclass
class DayDetail:
    """Transactions hitting one forecast day with the balance either side of them."""
    date: date
    opening_balance: float
    closing_balance: float
    transactions: List[Transaction] = field(default_factory=list)
