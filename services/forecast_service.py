### Forecast service replays recurring transactions day by day and accumulates cash flow into a running balance.
from collections import defaultdict
from datetime import date
from typing import Dict, List

from models.projection_dto import CalculationResult
from services.occurrence_service import generate_occurrence_dates
from utils.dates import date_range, to_date


def calculate_cash_flow(day, transactions) -> float:
    """Sum the amounts of every transaction occurring on ``day``.

    Expands each transaction's full series on every call; fine for a single
    day, use ``calculate_results`` for a whole horizon.
    """
    day = to_date(day)
    total = 0
    for transaction in transactions:
        if day in generate_occurrence_dates(transaction):
            total = total + transaction.amount
    return total


def calculate_balance(previous_balance: float, cash_flow: float) -> float:
    return previous_balance + cash_flow


def build_cash_flow_index(start_date: date, end_date: date, transactions) -> Dict[date, float]:
    """Map each date in ``[start_date, end_date]`` that has activity to its cash flow.

    Every series is expanded once, bounded to the horizon. Amounts are added
    in transaction order so each day's total matches ``calculate_cash_flow``.
    """
    index = defaultdict(int)
    for transaction in transactions:
        for occurrence in generate_occurrence_dates(transaction, until=end_date):
            if occurrence >= start_date:
                index[occurrence] = index[occurrence] + transaction.amount
    return index


def calculate_results(start_date, end_date, starting_balance: float, transactions) -> List[CalculationResult]:
    """
    Daily cash flow and running balance from ``start_date`` to ``end_date`` inclusive.

    Args:
        start_date: First forecast day (date or ``YYYY-MM-DD``).
        end_date: Last forecast day, inclusive.
        starting_balance: Balance before the first day's cash flow.
        transactions: Snapshot of transactions to replay.

    Returns:
        One ``CalculationResult`` per day; empty when ``start_date > end_date``.

    Pure function: same inputs → same output, no side effects.
    """
    start_date = to_date(start_date)
    end_date = to_date(end_date)
    transactions = list(transactions)

    index = build_cash_flow_index(start_date, end_date, transactions)

    results = []
    previous_balance = starting_balance
    for day in date_range(start_date, end_date):
        cash_flow = index.get(day, 0)
        balance = calculate_balance(previous_balance, cash_flow)
        results.append(CalculationResult(date=day, cash_flow=cash_flow, balance=balance))
        previous_balance = balance

    return results
