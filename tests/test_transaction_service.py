from datetime import date

import pytest

from models.errors import InvalidFrequency, TransactionNotFound
from models.transaction import Transaction, Uom
from services.transaction_service import (
    add_transaction,
    delete_transaction,
    get_all_transactions,
    get_transaction,
    update_transaction_field,
)


def _add_rent(**overrides):
    fields = dict(name=" Rent ", amount=-1200, start_date="2024-01-03",
                  end_date="2024-12-03", frequency=1, uom="month")
    fields.update(overrides)
    return add_transaction(**fields)


def test_add_assigns_id_and_normalises(store):
    rent = _add_rent()

    assert rent.id is not None
    assert rent.name == "Rent"
    assert rent.amount == -1200.0
    assert rent.start_date == date(2024, 1, 3)
    assert rent.uom is Uom.MONTH
    assert get_all_transactions() == [rent]


def test_ids_follow_insertion_order(store):
    first = _add_rent(name="A")
    second = _add_rent(name="B")
    assert second.id > first.id
    assert [t.name for t in get_all_transactions()] == ["A", "B"]


def test_add_rejects_malformed_transactions(store):
    with pytest.raises(ValueError):
        _add_rent(start_date="2024-02-01", end_date="2024-01-01")
    with pytest.raises(InvalidFrequency):
        _add_rent(frequency=-2)
    with pytest.raises(ValueError):
        _add_rent(uom="fortnight")
    with pytest.raises(ValueError):
        _add_rent(start_date="03/01/2024")
    assert get_all_transactions() == []


def test_update_single_field(store):
    rent = _add_rent()

    updated = update_transaction_field(rent.id, "amount", "-1250.5")
    assert updated.amount == -1250.5

    updated = update_transaction_field(rent.id, "start_date", "2024-02-03")
    assert updated.start_date == date(2024, 2, 3)

    updated = update_transaction_field(rent.id, "uom", "week")
    assert updated.uom is Uom.WEEK
    assert updated.name == "Rent"


def test_update_keeps_date_order(store):
    rent = _add_rent()
    with pytest.raises(ValueError):
        update_transaction_field(rent.id, "end_date", "2023-12-31")
    with pytest.raises(ValueError):
        update_transaction_field(rent.id, "start_date", "2025-01-01")
    assert get_transaction(rent.id).end_date == date(2024, 12, 3)


def test_update_rejects_bad_fields_and_values(store):
    rent = _add_rent()
    with pytest.raises(ValueError):
        update_transaction_field(rent.id, "id", 99)
    with pytest.raises(InvalidFrequency):
        update_transaction_field(rent.id, "frequency", -1)
    with pytest.raises(TransactionNotFound):
        update_transaction_field(rent.id + 100, "amount", 1)


def test_delete(store):
    rent = _add_rent()
    delete_transaction(rent.id)
    assert get_all_transactions() == []
    with pytest.raises(TransactionNotFound):
        delete_transaction(rent.id)
    with pytest.raises(LookupError):
        get_transaction(rent.id)


def test_from_row_normalises_types():
    t = Transaction.from_row((3, "Gym", "29.99", "2024-01-05", date(2024, 6, 5), "1", "month"))
    assert t.amount == 29.99
    assert t.start_date == date(2024, 1, 5)
    assert t.frequency == 1
    assert t.to_dict() == {
        "id": 3,
        "name": "Gym",
        "amount": 29.99,
        "start_date": "2024-01-05",
        "end_date": "2024-06-05",
        "frequency": 1,
        "uom": "month",
    }
