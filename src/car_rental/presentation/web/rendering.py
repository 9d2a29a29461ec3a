"""Server-side page rendering with Jinja2 templates."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from car_rental.domain.entities.booking import Booking
from car_rental.domain.entities.car import Car

TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class HomePage:
    """Data for the car list and booking form."""

    cars: List[Car] = field(default_factory=list)
    message: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class AdminPage:
    """Data for the admin booking list."""

    bookings: List[Booking] = field(default_factory=list)


class PageRenderer:
    """Turns a page value into an HTML response."""

    def __init__(self, directory: Path = TEMPLATES_DIR):
        self._templates = Jinja2Templates(directory=str(directory))

    def render(self, request: Request, view_name: str, page: Any, status_code: int = 200) -> HTMLResponse:
        """Render the template named after the view with the page's fields."""
        return self._templates.TemplateResponse(
            request,
            f"{view_name}.html",
            self._context(page),
            status_code=status_code
        )

    @staticmethod
    def _context(page: Any) -> Dict[str, Any]:
        return {f.name: getattr(page, f.name) for f in fields(page)}


renderer = PageRenderer()
