"""Date range value object for rental periods."""

from dataclasses import dataclass
from datetime import date

from ..exceptions import InvalidDateRangeError


@dataclass(frozen=True)
class DateRange:
    """Immutable inclusive range of calendar dates."""

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        """Validate the range."""
        if self.start_date > self.end_date:
            raise InvalidDateRangeError()

    @property
    def days(self) -> int:
        """Number of calendar days covered, both ends included."""
        return (self.end_date - self.start_date).days + 1

    def __str__(self) -> str:
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"
