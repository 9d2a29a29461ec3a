"""Default catalog seeding."""

from typing import List

from car_rental.application.ports.repositories import CarRepository
from car_rental.domain.entities.car import Car
from car_rental.infrastructure.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CAR_NAMES = ("Honda City", "Maruti Swift", "Mahindra Scorpio")


async def seed_catalog(car_repository: CarRepository) -> List[Car]:
    """Add the default cars when the catalog is empty.

    Returns the cars that were created (empty if the catalog already had cars).
    """
    existing = await car_repository.count()
    if existing:
        logger.info("Car catalog already populated, skipping seed", extra={"car_count": existing})
        return []

    cars = [await car_repository.save(Car(name)) for name in DEFAULT_CAR_NAMES]
    logger.info("Seeded car catalog", extra={"car_count": len(cars)})
    return cars
