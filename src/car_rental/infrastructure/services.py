"""Dependency injection and service factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from car_rental.application.services.booking_service import BookingService
from car_rental.infrastructure.database.connection import DatabaseManager
from car_rental.infrastructure.logging import get_logger
from car_rental.infrastructure.repositories.sql_repositories import (
    SQLAlchemyBookingRepository,
    SQLAlchemyCarRepository
)
from car_rental.infrastructure.seed import seed_catalog
from car_rental.presentation.web.config import get_settings

logger = get_logger(__name__)


class ServiceFactory:
    """Factory for creating application services with proper dependencies."""

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        create_tables: bool = True,
        seed: bool = True
    ):
        self.database_manager = DatabaseManager(database_url, echo=echo)
        self._create_tables = create_tables
        self._seed = seed
        self._connected = False

    async def initialize(self) -> None:
        """Connect, create tables and seed the catalog as configured."""
        if self._connected:
            return

        await self.database_manager.connect()
        self._connected = True

        if self._create_tables:
            await self.database_manager.create_tables()

        if self._seed:
            async with self.database_manager.get_session() as session:
                await seed_catalog(SQLAlchemyCarRepository(session))

        logger.info("Services initialized")

    async def shutdown(self) -> None:
        """Shutdown the service factory."""
        if self._connected:
            await self.database_manager.disconnect()
            self._connected = False

    @asynccontextmanager
    async def get_booking_service(self) -> AsyncGenerator[BookingService, None]:
        """Get a booking service bound to one database session.

        The car update and booking insert made through it are committed
        together when the context exits.
        """
        async with self.database_manager.get_session() as session:
            yield BookingService(
                car_repository=SQLAlchemyCarRepository(session),
                booking_repository=SQLAlchemyBookingRepository(session)
            )


# Global service factory instance
_service_factory: ServiceFactory | None = None


def get_service_factory() -> ServiceFactory:
    """Get the global service factory instance."""
    global _service_factory

    if _service_factory is None:
        settings = get_settings()
        _service_factory = ServiceFactory(
            settings.database_url,
            echo=settings.database_echo,
            create_tables=settings.create_tables,
            seed=settings.seed_catalog
        )

    return _service_factory


def reset_service_factory() -> None:
    """Drop the global factory so the next lookup rebuilds it from settings."""
    global _service_factory
    _service_factory = None


async def initialize_services() -> None:
    """Initialize application services."""
    await get_service_factory().initialize()


async def shutdown_services() -> None:
    """Shutdown application services."""
    await get_service_factory().shutdown()
