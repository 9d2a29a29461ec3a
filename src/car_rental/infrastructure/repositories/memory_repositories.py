"""In-memory repository implementations for testing and development."""

from itertools import count
from typing import Dict, List, Optional, Tuple

from car_rental.application.ports.repositories import BookingRepository, CarRepository
from car_rental.domain.entities.booking import Booking
from car_rental.domain.entities.car import Car


class InMemoryCarRepository(CarRepository):
    """In-memory implementation of the car catalog.

    Rows are stored as plain tuples so callers never share entity instances
    with the store, the same as loading from a database.
    """

    def __init__(self):
        self._cars: Dict[int, Tuple[str, bool]] = {}
        self._ids = count(1)

    async def list_available(self) -> List[Car]:
        """List available cars in ID order."""
        return [
            Car(name=name, car_id=car_id, available=available)
            for car_id, (name, available) in sorted(self._cars.items())
            if available
        ]

    async def find_by_id(self, car_id: int) -> Optional[Car]:
        """Find car by ID."""
        row = self._cars.get(car_id)
        if row is None:
            return None
        name, available = row
        return Car(name=name, car_id=car_id, available=available)

    async def save(self, car: Car) -> Car:
        """Insert a new car or update an existing one."""
        if car.id is None:
            car.assign_id(next(self._ids))
        self._cars[car.id] = (car.name, car.available)
        return car

    async def count(self) -> int:
        """Count all cars."""
        return len(self._cars)


class InMemoryBookingRepository(BookingRepository):
    """In-memory implementation of the booking ledger."""

    def __init__(self):
        self._bookings: Dict[int, Booking] = {}
        self._ids = count(1)

    async def save(self, booking: Booking) -> Booking:
        """Insert a booking and assign its generated ID."""
        booking.assign_id(next(self._ids))
        self._bookings[booking.id] = booking
        return booking

    async def list_all_newest_first(self) -> List[Booking]:
        """List every booking, highest ID first."""
        return [self._bookings[booking_id] for booking_id in sorted(self._bookings, reverse=True)]
