from models.transaction import Transaction
from utils.dates import to_date

# -----------------------------
# Transactions Repository
# -----------------------------

COLUMNS = "id, name, amount, start_date, end_date, frequency, uom"

# fields a caller may change one at a time; id is store-owned
UPDATABLE_FIELDS = ("name", "amount", "start_date", "end_date", "frequency", "uom")
DATE_FIELDS = ("start_date", "end_date")


def get_all_transactions(conn):
    """
    Returns every stored transaction in insertion (id) order.
    - conn: DuckDB connection
    """
    rows = conn.execute(f"SELECT {COLUMNS} FROM transactions ORDER BY id").fetchall()
    return [Transaction.from_row(row) for row in rows]


def get_transaction_by_id(conn, transaction_id):
    """
    Returns a single transaction, or None if the id is unknown.
    """
    row = conn.execute(
        f"SELECT {COLUMNS} FROM transactions WHERE id = ?",
        (transaction_id,)
    ).fetchone()
    if row:
        return Transaction.from_row(row)
    return None


def insert_transaction(conn, name, amount, start_date, end_date, frequency, uom):
    """
    Inserts a transaction and returns it as stored (with its new id).
    - conn: DuckDB connection (from get_db() or passed in)
    - dates may be date objects or YYYY-MM-DD strings
    """
    row = conn.execute(
        f"""
        INSERT INTO transactions (name, amount, start_date, end_date, frequency, uom)
        VALUES (?, ?, ?, ?, ?, ?)
        RETURNING {COLUMNS}
        """,
        (
            name,
            amount,
            to_date(start_date),
            to_date(end_date),
            frequency,
            getattr(uom, "value", uom),
        )
    ).fetchone()
    return Transaction.from_row(row)


def update_transaction_field(conn, transaction_id, field, value):
    """
    Updates a single field of a transaction.
    - field: one of UPDATABLE_FIELDS, anything else raises ValueError
    - date fields are normalised to calendar dates first
    """
    if field not in UPDATABLE_FIELDS:
        raise ValueError(f"Field {field!r} cannot be updated")

    if field in DATE_FIELDS:
        value = to_date(value)
    elif field == "uom":
        value = getattr(value, "value", value)

    # field is whitelisted above, safe to interpolate
    conn.execute(
        f"""
        UPDATE transactions
        SET {field} = ?
        WHERE id = ?
        """,
        (value, transaction_id)
    )


def delete_transaction(conn, transaction_id):
    """
    Deletes a transaction by id. Unknown ids are a no-op.
    """
    conn.execute(
        "DELETE FROM transactions WHERE id = ?",
        (transaction_id,)
    )
