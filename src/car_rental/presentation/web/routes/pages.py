"""Customer-facing pages: available cars and the booking form."""

from datetime import date

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from car_rental.domain.exceptions import BookingError
from car_rental.infrastructure.services import get_service_factory

from ..rendering import HomePage, renderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """Show available cars and the booking form."""
    service_factory = get_service_factory()
    async with service_factory.get_booking_service() as booking_service:
        cars = await booking_service.list_available_cars()

    return renderer.render(request, "home", HomePage(cars=cars))


@router.post("/book", response_class=HTMLResponse)
async def book_car(
    request: Request,
    name: str = Form(..., pattern=r"^\s*\S", description="Customer name"),
    car_id: int = Form(..., alias="carId"),
    start_date: date = Form(..., alias="startDate"),
    end_date: date = Form(..., alias="endDate")
) -> HTMLResponse:
    """Submit a booking and re-render the home page with the outcome."""
    service_factory = get_service_factory()

    try:
        async with service_factory.get_booking_service() as booking_service:
            result = await booking_service.submit_booking(
                customer_name=name,
                car_id=car_id,
                start_date=start_date,
                end_date=end_date
            )
            cars = await booking_service.list_available_cars()

        page = HomePage(cars=cars, message=result.message)

    except BookingError as e:
        async with service_factory.get_booking_service() as booking_service:
            cars = await booking_service.list_available_cars()

        page = HomePage(cars=cars, error=e.user_message)

    return renderer.render(request, "home", page)
