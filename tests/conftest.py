from datetime import date

import pytest

import config
from db import init_db
from models.transaction import Transaction


@pytest.fixture
def store(tmp_path, monkeypatch):
    """Point the store at a throwaway DuckDB file with the schema created."""
    monkeypatch.setattr(config, "DB_FILE", str(tmp_path / "forecast.duckdb"))
    init_db()
    return config.DB_FILE


def make_transaction(start, end, frequency=1, uom="month", amount=100.0, id=1, name="Rent"):
    return Transaction(
        id=id,
        name=name,
        amount=amount,
        start_date=start,
        end_date=end,
        frequency=frequency,
        uom=uom,
    )


@pytest.fixture
def salary():
    return make_transaction(date(2024, 1, 1), date(2024, 3, 1), frequency=1, uom="month", amount=1000.0, name="Salary")
