"""
Occurrence Service — recurrence expansion and future-relevance checks.

Pure functions of the transaction fields and an explicit reference date.
No database access; no side effects.
"""
from datetime import date
from typing import List, Optional

from models.errors import DateOverflow, InvalidFrequency
from models.transaction import Transaction
from utils.dates import add_interval, to_date


def _check_frequency(transaction: Transaction):
    # a negative step would walk backwards forever
    if transaction.frequency < 0:
        raise InvalidFrequency(
            f"Transaction {transaction.id!r} has negative frequency {transaction.frequency}"
        )


def _next_occurrence(current: date, transaction: Transaction) -> Optional[date]:
    """Step one interval forward; None once the step runs past the calendar."""
    try:
        return add_interval(current, transaction.frequency, transaction.uom)
    except DateOverflow:
        return None


def generate_occurrence_dates(transaction: Transaction, until: Optional[date] = None) -> List[date]:
    """
    Return every date on which the transaction applies, in increasing order.

    Args:
        transaction: Transaction to expand.
        until: Optional inclusive upper bound; enumeration stops once the
               series passes it. ``None`` expands the whole series.

    A one-time transaction (``frequency == 0``) yields exactly its start
    date, even when ``start_date > end_date``. A recurring one whose start
    is after its end yields nothing.
    """
    _check_frequency(transaction)

    last = transaction.end_date
    if until is not None:
        last = min(last, to_date(until))

    current = transaction.start_date
    if transaction.frequency == 0:
        if until is not None and current > to_date(until):
            return []
        return [current]

    dates = []
    while current is not None and current <= last:
        dates.append(current)
        current = _next_occurrence(current, transaction)
    return dates


def has_future_occurrence(transaction: Transaction, reference_date) -> bool:
    """
    Does the transaction occur on or after ``reference_date``?

    Steps through elapsed periods only; the series after the reference
    date is never materialised.
    """
    _check_frequency(transaction)
    reference_date = to_date(reference_date)

    if transaction.end_date < reference_date:
        return False
    if transaction.start_date >= reference_date:
        return True
    if transaction.frequency == 0:
        return False

    current = transaction.start_date
    while current < reference_date:
        current = _next_occurrence(current, transaction)
        if current is None:
            return False
    return current <= transaction.end_date


def get_future_transactions(transactions, reference_date) -> List[Transaction]:
    """Transactions with at least one occurrence on or after ``reference_date``, order kept."""
    reference_date = to_date(reference_date)
    return [t for t in transactions if has_future_occurrence(t, reference_date)]


def occurs_on(transaction: Transaction, day) -> bool:
    day = to_date(day)
    return day in generate_occurrence_dates(transaction, until=day)


def transactions_on_date(day, transactions) -> List[Transaction]:
    """Transactions with an occurrence on exactly ``day``.

    Derived from the generator, so weekly and monthly matching follows the
    same stepping (and month-end clamping) as the forecast itself.
    """
    day = to_date(day)
    return [t for t in transactions if occurs_on(t, day)]
