"""
Calendar-date primitives.

All forecast logic works on timezone-less ``datetime.date`` values; nothing
here reads the wall clock.
"""
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from models.errors import DateOverflow, InvalidDateFormat

DATE_FORMAT = "%Y-%m-%d"


def to_date(value) -> date:
    """Normalise a ``YYYY-MM-DD`` string, ``date`` or ``datetime`` to a ``date``.

    Time of day is discarded. Anything else raises ``InvalidDateFormat``;
    there is no fallback to today.
    """
    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), DATE_FORMAT).date()
        except ValueError as exc:
            raise InvalidDateFormat(f"Invalid date format: {value!r}. Use YYYY-MM-DD.") from exc
    raise InvalidDateFormat(f"Cannot interpret {value!r} as a date")


def format_date_string(d) -> str:
    return to_date(d).strftime(DATE_FORMAT)


def add_days(d: date, n: int) -> date:
    try:
        return d + timedelta(days=n)
    except OverflowError as exc:
        raise DateOverflow(f"{d} + {n} days is out of range") from exc


def add_weeks(d: date, n: int) -> date:
    return add_days(d, 7 * n)


def add_months(d: date, n: int) -> date:
    """Calendar month arithmetic.

    A day-of-month missing from the target month clamps to its last day,
    e.g. 2024-01-31 + 1 month == 2024-02-29.
    """
    try:
        return d + relativedelta(months=n)
    except (OverflowError, ValueError) as exc:
        raise DateOverflow(f"{d} + {n} months is out of range") from exc


def add_interval(d: date, n: int, uom) -> date:
    """Advance ``d`` by ``n`` units of ``uom`` (``day``, ``week`` or ``month``)."""
    unit = getattr(uom, "value", uom)
    if unit == "month":
        return add_months(d, n)
    if unit == "week":
        return add_weeks(d, n)
    if unit == "day":
        return add_days(d, n)
    raise ValueError(f"Unknown unit of measure: {uom!r}")


def add_forecast_horizon(today: date, months: int) -> date:
    return add_months(to_date(today), months)


def date_range(start: date, end: date):
    """Yield every date from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        if current == date.max:
            return
        current = add_days(current, 1)


def inclusive_day_count(start: date, end: date) -> int:
    if start > end:
        return 0
    return (end - start).days + 1
