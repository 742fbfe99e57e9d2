import logging
from datetime import date

import config
from models.projection_dto import DayDetail, ForecastResult
from services.forecast_service import calculate_results
from services.occurrence_service import get_future_transactions, transactions_on_date
from services.transaction_service import get_all_transactions
from utils.dates import add_forecast_horizon, to_date


def resolve_horizon_months(months=None) -> int:
    if months is None:
        return config.DEFAULT_FORECAST_MONTHS
    months = int(months)
    if not config.MIN_FORECAST_MONTHS <= months <= config.MAX_FORECAST_MONTHS:
        raise ValueError(
            f"months must be between {config.MIN_FORECAST_MONTHS} "
            f"and {config.MAX_FORECAST_MONTHS}, got {months}"
        )
    return months


def calculate_projection(as_of_date=None, months=None, starting_balance=None,
                         transactions=None) -> ForecastResult:
    """Deterministic balance projection from ``as_of_date`` over ``months`` months.

    Pure function of the transaction snapshot, the starting balance and the
    reference date. Only transactions that still have an occurrence on or
    after the reference date are replayed. When ``transactions`` is omitted
    the snapshot is read from the store.
    """
    today = to_date(as_of_date) if as_of_date is not None else date.today()
    months = resolve_horizon_months(months)
    if starting_balance is None:
        starting_balance = config.DEFAULT_STARTING_BALANCE
    end_date = add_forecast_horizon(today, months)

    if transactions is None:
        transactions = get_all_transactions()

    relevant = get_future_transactions(transactions, today)
    timeline = calculate_results(today, end_date, starting_balance, relevant)

    logging.info(
        f"Forecast {today}..{end_date}: {len(relevant)} of {len(transactions)} transactions relevant"
    )

    return ForecastResult(
        start_date=today,
        end_date=end_date,
        starting_balance=starting_balance,
        timeline=timeline,
        months=months,
    )


def get_day_detail(day, projection: ForecastResult, transactions) -> DayDetail:
    """Break down one forecast day: what hit it and the balance before and after.

    ``transactions`` is the same snapshot the projection was built from.
    Raises ``KeyError`` if ``day`` lies outside the projection.
    """
    day = to_date(day)
    relevant = get_future_transactions(transactions, projection.start_date)

    opening_balance = projection.starting_balance
    for result in projection.timeline:
        if result.date == day:
            return DayDetail(
                date=day,
                opening_balance=opening_balance,
                closing_balance=result.balance,
                transactions=transactions_on_date(day, relevant),
            )
        opening_balance = result.balance

    raise KeyError(f"{day.isoformat()} is outside the forecast {projection.start_date}..{projection.end_date}")
