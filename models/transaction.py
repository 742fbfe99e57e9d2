from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from models.errors import InvalidFrequency
from utils.dates import to_date


class Uom(str, Enum):
    """Unit of the recurrence interval."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class Transaction:
    """A recurring (or one-time, ``frequency == 0``) cash effect."""
    id: Optional[int]
    name: str
    amount: float
    start_date: date
    end_date: date
    frequency: int
    uom: Uom

    def __post_init__(self):
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "start_date", to_date(self.start_date))
        object.__setattr__(self, "end_date", to_date(self.end_date))
        object.__setattr__(self, "uom", Uom(self.uom))
        if self.frequency < 0:
            raise InvalidFrequency(f"frequency must be >= 0, got {self.frequency}")

    @property
    def is_one_time(self) -> bool:
        return self.frequency == 0

    @classmethod
    def from_row(cls, row):
        """Build from a store row ``(id, name, amount, start_date, end_date, frequency, uom)``."""
        return cls(
            id=row[0],
            name=row[1],
            amount=float(row[2]),
            start_date=row[3],
            end_date=row[4],
            frequency=int(row[5]),
            uom=row[6],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "frequency": self.frequency,
            "uom": self.uom.value,
        }
