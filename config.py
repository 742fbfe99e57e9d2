import os

# -----------------------------
# Storage / logging
# -----------------------------
DB_FILE = os.getenv("BUDGET_DB_FILE", "forecast.duckdb")
LOG_FILE = os.getenv("BUDGET_LOG_FILE", "forecast.log")

# -----------------------------
# Forecast defaults
# -----------------------------
DEFAULT_STARTING_BALANCE = float(os.getenv("DEFAULT_STARTING_BALANCE", "1000"))
DEFAULT_FORECAST_MONTHS = int(os.getenv("DEFAULT_FORECAST_MONTHS", "3"))

# horizon slider bounds
MIN_FORECAST_MONTHS = 1
MAX_FORECAST_MONTHS = 12
