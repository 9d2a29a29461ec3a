"""SQLAlchemy repository implementations."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from car_rental.application.ports.repositories import BookingRepository, CarRepository
from car_rental.domain.entities.booking import Booking
from car_rental.domain.entities.car import Car
from car_rental.infrastructure.database.models import BookingModel, CarModel
from car_rental.infrastructure.logging import get_logger, log_database_operation


class SQLAlchemyCarRepository(CarRepository):
    """SQLAlchemy implementation of the car catalog."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._logger = get_logger(__name__)

    async def list_available(self) -> List[Car]:
        """List available cars in ID order."""
        log_database_operation(self._logger, "SELECT", "CarModel", available=True)

        stmt = select(CarModel).where(CarModel.available == True).order_by(CarModel.id)
        result = await self._session.execute(stmt)

        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def find_by_id(self, car_id: int) -> Optional[Car]:
        """Find car by ID."""
        log_database_operation(self._logger, "SELECT", "CarModel", car_id=car_id)

        car_model = await self._session.get(CarModel, car_id)
        if not car_model:
            return None

        return self._model_to_entity(car_model)

    async def save(self, car: Car) -> Car:
        """Insert a new car or update an existing one."""
        existing_car = await self._session.get(CarModel, car.id) if car.id is not None else None

        if existing_car:
            log_database_operation(self._logger, "UPDATE", "CarModel", car_id=car.id)
            existing_car.name = car.name
            existing_car.available = car.available
            await self._session.flush()
            return car

        log_database_operation(self._logger, "INSERT", "CarModel", car_name=car.name)
        car_model = CarModel(id=car.id, name=car.name, available=car.available)
        self._session.add(car_model)
        await self._session.flush()

        if car.id is None:
            car.assign_id(car_model.id)
        return car

    async def count(self) -> int:
        """Count all cars."""
        result = await self._session.execute(select(func.count(CarModel.id)))
        return result.scalar_one()

    def _model_to_entity(self, model: CarModel) -> Car:
        """Convert database model to domain entity."""
        return Car(name=model.name, car_id=model.id, available=model.available)


class SQLAlchemyBookingRepository(BookingRepository):
    """SQLAlchemy implementation of the booking ledger."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._logger = get_logger(__name__)

    async def save(self, booking: Booking) -> Booking:
        """Insert a booking and assign its generated ID."""
        log_database_operation(
            self._logger,
            "INSERT",
            "BookingModel",
            car_id=booking.car_id
        )

        booking_model = BookingModel(
            customer_name=booking.customer_name,
            car_id=booking.car_id,
            car_name=booking.car_name,
            start_date=booking.start_date,
            end_date=booking.end_date,
            created_at=booking.created_at
        )
        self._session.add(booking_model)
        await self._session.flush()

        booking.assign_id(booking_model.id)
        return booking

    async def list_all_newest_first(self) -> List[Booking]:
        """List every booking, highest ID first."""
        log_database_operation(self._logger, "SELECT", "BookingModel")

        stmt = select(BookingModel).order_by(BookingModel.id.desc())
        result = await self._session.execute(stmt)

        return [self._model_to_entity(model) for model in result.scalars().all()]

    def _model_to_entity(self, model: BookingModel) -> Booking:
        """Convert database model to domain entity."""
        return Booking(
            booking_id=model.id,
            customer_name=model.customer_name,
            car_id=model.car_id,
            car_name=model.car_name,
            start_date=model.start_date,
            end_date=model.end_date,
            created_at=model.created_at
        )
