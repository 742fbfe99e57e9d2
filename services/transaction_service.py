import logging

from db import get_db
from models.errors import InvalidFrequency, TransactionNotFound
from models.transaction import Transaction, Uom
from repositories.transactions_repository import (
    UPDATABLE_FIELDS,
    DATE_FIELDS,
    get_all_transactions as repo_get_all_transactions,
    get_transaction_by_id as repo_get_transaction_by_id,
    insert_transaction as repo_insert_transaction,
    update_transaction_field as repo_update_transaction_field,
    delete_transaction as repo_delete_transaction,
)
from utils.dates import to_date


def _coerce_field(field, value):
    """Convert a raw field value (form/JSON input) to its stored type."""
    if field not in UPDATABLE_FIELDS:
        raise ValueError(f"Field {field!r} cannot be updated")
    if field in DATE_FIELDS:
        return to_date(value)
    if field == "amount":
        return float(value)
    if field == "frequency":
        frequency = int(value)
        if frequency < 0:
            raise InvalidFrequency(f"frequency must be >= 0, got {frequency}")
        return frequency
    if field == "uom":
        return Uom(value)
    return str(value).strip()


def _check_date_order(start_date, end_date):
    if start_date > end_date:
        raise ValueError(
            f"start_date {start_date.isoformat()} is after end_date {end_date.isoformat()}"
        )


def get_all_transactions():
    """Return every stored transaction.

    Opens and closes a database connection on the caller’s behalf.
    """
    conn = get_db()
    try:
        return repo_get_all_transactions(conn)
    finally:
        conn.close()


def get_transaction(transaction_id):
    conn = get_db()
    try:
        transaction = repo_get_transaction_by_id(conn, transaction_id)
    finally:
        conn.close()
    if transaction is None:
        raise TransactionNotFound(f"Transaction {transaction_id} not found")
    return transaction


def add_transaction(*, name, amount, start_date, end_date, frequency=0, uom=Uom.DAY):
    """Validate and store a new transaction; returns it with its id.

    Rejects a negative frequency and a start date after the end date.
    """
    # builds (and validates) before touching the store
    draft = Transaction(
        id=None,
        name=str(name).strip(),
        amount=float(amount),
        start_date=start_date,
        end_date=end_date,
        frequency=int(frequency),
        uom=uom,
    )
    _check_date_order(draft.start_date, draft.end_date)

    conn = get_db()
    try:
        stored = repo_insert_transaction(
            conn,
            name=draft.name,
            amount=draft.amount,
            start_date=draft.start_date,
            end_date=draft.end_date,
            frequency=draft.frequency,
            uom=draft.uom,
        )
    except Exception as e:
        logging.error(f"Error adding transaction {draft.name!r}: {e}")
        raise
    finally:
        conn.close()

    logging.info(f"Transaction {stored.id} added ({stored.name}, {stored.amount})")
    return stored


def update_transaction_field(transaction_id, field, value):
    """Change one field of a stored transaction and return the updated record.

    Date changes are checked against the stored counterpart so the
    start <= end ordering is kept.
    """
    value = _coerce_field(field, value)

    conn = get_db()
    try:
        current = repo_get_transaction_by_id(conn, transaction_id)
        if current is None:
            raise TransactionNotFound(f"Transaction {transaction_id} not found")

        if field == "start_date":
            _check_date_order(value, current.end_date)
        elif field == "end_date":
            _check_date_order(current.start_date, value)

        repo_update_transaction_field(conn, transaction_id, field, value)
        updated = repo_get_transaction_by_id(conn, transaction_id)
    except TransactionNotFound:
        logging.warning(f"Update of unknown transaction {transaction_id}")
        raise
    finally:
        conn.close()

    logging.info(f"Transaction {transaction_id} field {field} updated")
    return updated


def delete_transaction(transaction_id):
    conn = get_db()
    try:
        if repo_get_transaction_by_id(conn, transaction_id) is None:
            logging.warning(f"Delete of unknown transaction {transaction_id}")
            raise TransactionNotFound(f"Transaction {transaction_id} not found")
        repo_delete_transaction(conn, transaction_id)
    finally:
        conn.close()

    logging.info(f"Transaction {transaction_id} deleted")
