"""Booking entity for the rental ledger."""

from datetime import date, datetime
from typing import Optional

from ..value_objects.date_range import DateRange


class Booking:
    """Booking entity representing a rental reservation.

    The car name is copied in at booking time and is never refreshed from the
    catalog afterwards.
    """

    def __init__(
        self,
        customer_name: str,
        car_id: int,
        car_name: str,
        start_date: date,
        end_date: date,
        booking_id: Optional[int] = None,
        created_at: Optional[datetime] = None
    ):
        if not customer_name or not customer_name.strip():
            raise ValueError("Customer name cannot be empty")

        self._id = booking_id
        self._customer_name = customer_name
        self._car_id = car_id
        self._car_name = car_name
        self._period = DateRange(start_date, end_date)
        self._created_at = created_at or datetime.utcnow()

    @property
    def id(self) -> Optional[int]:
        """Get booking ID (None until the booking is saved)."""
        return self._id

    @property
    def customer_name(self) -> str:
        """Get customer name."""
        return self._customer_name

    @property
    def car_id(self) -> int:
        """Get the booked car ID."""
        return self._car_id

    @property
    def car_name(self) -> str:
        """Get the car name as it was when the booking was made."""
        return self._car_name

    @property
    def start_date(self) -> date:
        """Get rental start date."""
        return self._period.start_date

    @property
    def end_date(self) -> date:
        """Get rental end date."""
        return self._period.end_date

    @property
    def period(self) -> DateRange:
        """Get rental period."""
        return self._period

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    def assign_id(self, booking_id: int) -> None:
        """Assign the generated ID on insert."""
        if self._id is not None:
            raise ValueError("Booking ID is already assigned")
        self._id = booking_id

    def __eq__(self, other: object) -> bool:
        """Check equality based on booking ID."""
        if not isinstance(other, Booking):
            return False
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on booking ID."""
        return hash(self._id) if self._id is not None else id(self)

    def __str__(self) -> str:
        """String representation."""
        return f"Booking({self._id}, {self._customer_name}, car={self._car_id}, {self._period})"
