"""Car entity for the rental catalog."""

from typing import Optional


class Car:
    """Car entity representing a rentable vehicle and its availability."""

    def __init__(
        self,
        name: str,
        car_id: Optional[int] = None,
        available: bool = True
    ):
        if not name or not name.strip():
            raise ValueError("Car name cannot be empty")

        self._id = car_id
        self._name = name
        self._available = available

    @property
    def id(self) -> Optional[int]:
        """Get car ID (None until the car is first saved)."""
        return self._id

    @property
    def name(self) -> str:
        """Get car display name."""
        return self._name

    @property
    def available(self) -> bool:
        """Check if the car can be offered for booking."""
        return self._available

    def assign_id(self, car_id: int) -> None:
        """Assign the generated ID on first insert."""
        if self._id is not None:
            raise ValueError("Car ID is already assigned")
        self._id = car_id

    def mark_unavailable(self) -> None:
        """Take the car off the available list.

        There is no reverse transition: once booked, a car stays unavailable.
        """
        self._available = False

    def __eq__(self, other: object) -> bool:
        """Check equality based on car ID."""
        if not isinstance(other, Car):
            return False
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        """Hash based on car ID."""
        return hash(self._id) if self._id is not None else id(self)

    def __str__(self) -> str:
        """String representation."""
        return f"Car({self._id}, {self._name}, available={self._available})"
