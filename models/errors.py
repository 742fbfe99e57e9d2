"""
Forecast error taxonomy.

Every error doubles as the builtin it specialises so callers that only
know about ``ValueError`` / ``LookupError`` still catch them.
"""


class ForecastError(Exception):
    """Base class for all forecast and transaction-store errors."""


class InvalidDateFormat(ForecastError, ValueError):
    """A date input could not be parsed into a calendar date."""


class InvalidFrequency(ForecastError, ValueError):
    """Recurrence frequency is negative."""


class DateOverflow(ForecastError, OverflowError):
    """Date arithmetic left the representable calendar range."""


class TransactionNotFound(ForecastError, LookupError):
    """No transaction with the requested id exists in the store."""
