import duckdb
import logging

import config

# -----------------------------
# Logging
# -----------------------------
logging.basicConfig(
    filename=config.LOG_FILE,
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)

def log_info(msg):
    logging.info(msg)
    print(msg)

def log_error(msg):
    logging.error(msg)
    print(msg)

# -----------------------------
# Get a DB connection
# -----------------------------
def get_db():
    """
    Returns a new DuckDB connection to ``config.DB_FILE``.
    """
    return duckdb.connect(config.DB_FILE)

# -----------------------------
# Initialize database schema
# -----------------------------
def init_db():
    conn = get_db()
    try:
        conn.execute("""
        CREATE SEQUENCE IF NOT EXISTS transactions_id_seq START 1;
        """)

        # Recurring transactions table
        conn.execute("""
        CREATE TABLE IF NOT EXISTS transactions (
            id BIGINT PRIMARY KEY DEFAULT nextval('transactions_id_seq'),
            name VARCHAR NOT NULL,
            amount DOUBLE NOT NULL,
            start_date DATE NOT NULL,
            end_date DATE NOT NULL,
            frequency INTEGER NOT NULL DEFAULT 0 CHECK(frequency >= 0),
            uom VARCHAR NOT NULL CHECK(uom IN ('day','week','month')),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """)
        log_info("Transactions table ensured.")

    except Exception as e:
        log_error(f"Error initializing DB: {e}")
        raise
    finally:
        conn.close()
        log_info("Database setup complete and connection closed.")
