class HilalError(Exception):
    """Base error."""

class InvalidMonthError(HilalError, ValueError):
    """Raised by strict validation when a month lies outside 1..12."""

class InvalidDayError(HilalError, ValueError):
    """Raised by strict validation when a day lies outside 1..max for its month."""
