"""Booking service implementing the car reservation use case."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List

from car_rental.infrastructure.logging import (
    get_logger,
    log_business_rule_violation,
    log_with_extra
)

from ..ports.repositories import BookingRepository, CarRepository
from ...domain.entities.booking import Booking
from ...domain.entities.car import Car
from ...domain.exceptions import CarNotFoundError, InvalidDateRangeError


@dataclass(frozen=True)
class BookingResult:
    """Outcome of a successful booking submission."""

    success: bool
    car_name: str
    booking: Booking

    @property
    def message(self) -> str:
        """Confirmation message for the customer."""
        return f"Booking successful for {self.car_name}"


class BookingService:
    """Application service for car bookings.

    The read-flag, write-flag, insert-booking sequence takes no lock, so two
    concurrent submissions for the same car can both succeed.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        booking_repository: BookingRepository
    ):
        self._car_repository = car_repository
        self._booking_repository = booking_repository
        self._logger = get_logger(__name__)

    async def submit_booking(
        self,
        customer_name: str,
        car_id: int,
        start_date: date,
        end_date: date
    ) -> BookingResult:
        """Book a car for the given dates and take it off the available list.

        Raises:
            InvalidDateRangeError: start_date is after end_date. The car is
                not looked up.
            CarNotFoundError: no car with car_id exists.
        """
        if start_date > end_date:
            log_business_rule_violation(
                self._logger,
                "date_range",
                f"start date {start_date} is after end date {end_date}",
                car_id=car_id
            )
            raise InvalidDateRangeError()

        car = await self._car_repository.find_by_id(car_id)
        if car is None:
            log_business_rule_violation(
                self._logger,
                "car_exists",
                f"car {car_id} not found",
                car_id=car_id
            )
            raise CarNotFoundError(car_id)

        booking = Booking(
            customer_name=customer_name,
            car_id=car.id,
            car_name=car.name,
            start_date=start_date,
            end_date=end_date
        )

        car.mark_unavailable()
        await self._car_repository.save(car)
        saved_booking = await self._booking_repository.save(booking)

        log_with_extra(
            self._logger,
            logging.INFO,
            f"Car {car.id} booked",
            car_id=car.id,
            booking_id=saved_booking.id,
            start_date=str(start_date),
            end_date=str(end_date)
        )

        return BookingResult(success=True, car_name=car.name, booking=saved_booking)

    async def list_available_cars(self) -> List[Car]:
        """Get cars that can currently be booked."""
        return await self._car_repository.list_available()

    async def list_bookings(self) -> List[Booking]:
        """Get all bookings, newest first."""
        return await self._booking_repository.list_all_newest_first()
