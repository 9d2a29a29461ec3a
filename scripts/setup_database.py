"""Script to initialize database tables and seed the car catalog."""

import asyncio

from car_rental.infrastructure.database.connection import DatabaseManager
from car_rental.infrastructure.repositories.sql_repositories import SQLAlchemyCarRepository
from car_rental.infrastructure.seed import seed_catalog
from car_rental.presentation.web.config import get_settings


async def setup_database():
    """Set up database tables and seed the default cars."""
    settings = get_settings()
    database_manager = DatabaseManager(settings.database_url, echo=settings.database_echo)

    await database_manager.connect()
    try:
        await database_manager.create_tables()
        print("Database tables created successfully!")

        async with database_manager.get_session() as session:
            cars = await seed_catalog(SQLAlchemyCarRepository(session))

        if cars:
            print(f"Seeded {len(cars)} cars: {', '.join(car.name for car in cars)}")
        else:
            print("Car catalog already populated")
    finally:
        await database_manager.disconnect()


if __name__ == "__main__":
    asyncio.run(setup_database())
