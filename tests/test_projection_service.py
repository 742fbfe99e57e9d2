from datetime import date

import pytest

import config
from conftest import make_transaction
from models.projection_dto import ForecastResult
from services.projection_service import calculate_projection, get_day_detail, resolve_horizon_months
from services.transaction_service import add_transaction


def _snapshot():
    return [
        make_transaction(date(2024, 1, 1), date(2024, 12, 31), 1, "month", 1000.0, id=1, name="Salary"),
        make_transaction(date(2023, 1, 1), date(2023, 12, 31), 1, "month", -999.0, id=2, name="Old loan"),
        make_transaction(date(2024, 2, 1), date(2024, 2, 1), 0, "day", -250.0, id=3, name="Insurance"),
    ]


def test_projection_covers_horizon_and_summarises():
    projection = calculate_projection(
        as_of_date="2024-01-01", months=2, starting_balance=100.0, transactions=_snapshot()
    )

    assert projection.start_date == date(2024, 1, 1)
    assert projection.end_date == date(2024, 3, 1)
    assert len(projection.timeline) == 61
    assert projection.total_cash_flow == 2750.0
    assert projection.final_balance == 2850.0
    assert projection.months == 2


def test_projection_defaults(monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_STARTING_BALANCE", 1000.0)
    monkeypatch.setattr(config, "DEFAULT_FORECAST_MONTHS", 3)

    projection = calculate_projection(as_of_date=date(2024, 1, 1), transactions=[])

    assert projection.end_date == date(2024, 4, 1)
    assert projection.months == 3
    assert projection.final_balance == 1000.0


def test_projection_defaults_to_today():
    projection = calculate_projection(months=1, transactions=[])
    assert projection.start_date == date.today()


@pytest.mark.parametrize("months", [0, 13, -1])
def test_horizon_out_of_range_is_rejected(months):
    with pytest.raises(ValueError):
        resolve_horizon_months(months)


def test_empty_forecast_final_balance_is_starting_balance():
    result = ForecastResult(start_date=date(2024, 1, 2), end_date=date(2024, 1, 1), starting_balance=55.0)
    assert result.final_balance == 55.0
    assert result.total_cash_flow == 0


def test_day_detail_breaks_down_one_day():
    snapshot = _snapshot()
    projection = calculate_projection(
        as_of_date="2024-01-01", months=2, starting_balance=100.0, transactions=snapshot
    )

    detail = get_day_detail("2024-02-01", projection, snapshot)

    assert detail.opening_balance == 1100.0
    assert detail.closing_balance == 1850.0
    assert [t.name for t in detail.transactions] == ["Salary", "Insurance"]


def test_day_detail_first_day_opens_at_starting_balance():
    snapshot = _snapshot()
    projection = calculate_projection(
        as_of_date="2024-01-01", months=1, starting_balance=100.0, transactions=snapshot
    )
    detail = get_day_detail(date(2024, 1, 1), projection, snapshot)
    assert detail.opening_balance == 100.0
    assert detail.closing_balance == 1100.0


def test_day_detail_outside_forecast_raises():
    projection = calculate_projection(as_of_date="2024-01-01", months=1, transactions=[])
    with pytest.raises(KeyError):
        get_day_detail("2024-03-01", projection, [])


def test_projection_reads_store_when_no_snapshot_given(store):
    add_transaction(name="Salary", amount=1000.0, start_date="2024-01-01",
                    end_date="2024-03-01", frequency=1, uom="month")

    projection = calculate_projection(as_of_date="2024-01-01", months=2, starting_balance=0.0)

    assert projection.final_balance == 3000.0
