from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from typing import Optional
from services.projection_service import calculate_projection, get_day_detail
from services.transaction_service import get_all_transactions
from services.forecast_dto import DayDetailDTO, ForecastResponseDTO

router = APIRouter()


def _error(status_code, message):
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@router.get("/forecast")
def get_forecast(
    as_of_date: Optional[str] = Query(None),
    months: Optional[int] = Query(None),
    starting_balance: Optional[float] = Query(None),
):
    """
    Return a deterministic daily projection of the account balance.

    Query Parameters:
        as_of_date (optional): Reference date in ISO format (YYYY-MM-DD).
                              Defaults to today if not provided.
        months (optional): Horizon length in months (1-12, default 3).
        starting_balance (optional): Balance before the first day.

    Returns:
        ForecastResponseDTO: JSON containing the daily timeline and summary.
    """
    try:
        projection = calculate_projection(
            as_of_date=as_of_date,
            months=months,
            starting_balance=starting_balance,
        )
    except ValueError as e:
        return _error(400, str(e))

    dto = ForecastResponseDTO.from_projection(projection)

    return {
        "start_date": dto.start_date,
        "end_date": dto.end_date,
        "starting_balance": dto.starting_balance,
        "final_balance": dto.final_balance,
        "total_cash_flow": dto.total_cash_flow,
        "months": dto.months,
        "timeline": [
            {"date": day.date, "cash_flow": day.cash_flow, "balance": day.balance}
            for day in dto.timeline
        ]
    }


@router.get("/forecast/day/{day}")
def get_forecast_day(
    day: str,
    as_of_date: Optional[str] = Query(None),
    months: Optional[int] = Query(None),
    starting_balance: Optional[float] = Query(None),
):
    """
    Breakdown of a single forecast day: opening balance, the transactions
    occurring that day and the closing balance.
    """
    transactions = get_all_transactions()
    try:
        projection = calculate_projection(
            as_of_date=as_of_date,
            months=months,
            starting_balance=starting_balance,
            transactions=transactions,
        )
        detail = get_day_detail(day, projection, transactions)
    except KeyError as e:
        return _error(404, e.args[0])
    except ValueError as e:
        return _error(400, str(e))

    dto = DayDetailDTO.from_detail(detail)
    return {
        "date": dto.date,
        "opening_balance": dto.opening_balance,
        "closing_balance": dto.closing_balance,
        "transactions": dto.transactions,
    }
