"""Domain exceptions raised by the booking workflow."""


class BookingError(ValueError):
    """Base class for booking failures that are shown to the customer."""

    message = "Booking could not be completed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def user_message(self) -> str:
        """Get the message rendered back to the customer."""
        return str(self)


class InvalidDateRangeError(BookingError):
    """Raised when the start date falls after the end date."""

    message = "Start date must be before or equal to end date."


class CarNotFoundError(BookingError):
    """Raised when the requested car does not exist in the catalog."""

    message = "Car not found."

    def __init__(self, car_id: int | None = None):
        super().__init__()
        self.car_id = car_id
