"""History aggregation exceptions: timestamps and filter values."""

from typing import Optional

from .base import RepoPulseError


class HistoryError(RepoPulseError):
    """Base class for errors in commit history aggregation."""

    pass


class InvalidTimestampError(HistoryError):
    """Raised when an activity day cannot be read as a calendar date."""

    def __init__(self, timestamp: str):
        super().__init__(
            f"Invalid commit timestamp: {timestamp!r}",
            details={"expected": "YYYY-MM-DD"},
        )
        self.timestamp = timestamp


class InvalidFilterError(HistoryError):
    """Raised when a filter field has an unusable value."""

    def __init__(self, field: str, value: Optional[str], reason: str):
        super().__init__(
            f"Invalid filter {field}: {value!r}",
            details={"field": field, "reason": reason},
        )
        self.field = field
        self.value = value
        self.reason = reason
