"""Port interfaces for repositories (Dependency Inversion Principle)."""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from car_rental.domain.entities.booking import Booking
    from car_rental.domain.entities.car import Car


class CarRepository(ABC):
    """Port interface for the car catalog."""

    @abstractmethod
    async def list_available(self) -> List["Car"]:
        """List cars that are currently available."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, car_id: int) -> Optional["Car"]:
        """Find car by ID."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, car: "Car") -> "Car":
        """Save a car (insert if new, update otherwise)."""
        raise NotImplementedError

    @abstractmethod
    async def count(self) -> int:
        """Count all cars in the catalog."""
        raise NotImplementedError


class BookingRepository(ABC):
    """Port interface for the booking ledger."""

    @abstractmethod
    async def save(self, booking: "Booking") -> "Booking":
        """Save a new booking."""
        raise NotImplementedError

    @abstractmethod
    async def list_all_newest_first(self) -> List["Booking"]:
        """List all bookings ordered by ID descending."""
        raise NotImplementedError
