from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ForecastDayDTO:
    """Single day in the forecast timeline."""
    date: str  # ISO format YYYY-MM-DD
    cash_flow: float
    balance: float


@dataclass
class ForecastResponseDTO:
    """Complete forecast response: timeline plus summary statistics."""
    start_date: str  # ISO format
    end_date: str  # ISO format
    starting_balance: float
    final_balance: float
    total_cash_flow: float
    months: Optional[int]
    timeline: List[ForecastDayDTO]

    @classmethod
    def from_projection(cls, projection):
        """Convert ForecastResult to JSON-serializable DTO."""
        return cls(
            start_date=projection.start_date.isoformat(),
            end_date=projection.end_date.isoformat(),
            starting_balance=projection.starting_balance,
            final_balance=projection.final_balance,
            total_cash_flow=projection.total_cash_flow,
            months=projection.months,
            timeline=[
                ForecastDayDTO(
                    date=day.date.isoformat(),
                    cash_flow=day.cash_flow,
                    balance=day.balance,
                )
                for day in projection.timeline
            ]
        )


@dataclass
class DayDetailDTO:
    """One day's breakdown: balances either side and the transactions that hit it."""
    date: str
    opening_balance: float
    closing_balance: float
    transactions: List[dict] = field(default_factory=list)

    @classmethod
    def from_detail(cls, detail):
        return cls(
            date=detail.date.isoformat(),
            opening_balance=detail.opening_balance,
            closing_balance=detail.closing_balance,
            transactions=[t.to_dict() for t in detail.transactions],
        )
