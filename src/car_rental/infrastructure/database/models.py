"""SQLAlchemy database models."""

from datetime import datetime

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CarModel(Base):
    """SQLAlchemy model for cars."""

    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    available = Column(Boolean, nullable=False, default=True, index=True)

    def __repr__(self) -> str:
        return f"<CarModel(id={self.id}, name='{self.name}', available={self.available})>"


class BookingModel(Base):
    """SQLAlchemy model for bookings."""

    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)

    customer_name = Column(String(255), nullable=False)

    # Snapshot of the car at booking time, no foreign key
    car_id = Column(Integer, nullable=False, index=True)
    car_name = Column(String(100), nullable=True)

    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self) -> str:
        return f"<BookingModel(id={self.id}, customer_name='{self.customer_name}', car_id={self.car_id})>"
