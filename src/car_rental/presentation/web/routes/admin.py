"""Admin pages."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from car_rental.infrastructure.services import get_service_factory

from ..rendering import AdminPage, renderer

router = APIRouter()


@router.get("/bookings", response_class=HTMLResponse)
async def list_bookings(request: Request) -> HTMLResponse:
    """Show every booking, newest first."""
    service_factory = get_service_factory()
    async with service_factory.get_booking_service() as booking_service:
        bookings = await booking_service.list_bookings()

    return renderer.render(request, "admin", AdminPage(bookings=bookings))
