"""Integration tests for the HTML pages and booking form."""

import re

import httpx
import pytest
import pytest_asyncio

from car_rental.infrastructure import services
from car_rental.presentation.web.config import get_settings
from car_rental.presentation.web.main import create_app


BOOKING_FORM = {
    "name": "Alice",
    "carId": "1",
    "startDate": "2024-01-05",
    "endDate": "2024-01-10",
}


def available_car_names(html: str) -> list[str]:
    """Pull the car names out of the available cars table."""
    table = html.split('id="available-cars"', 1)[1].split("</table>", 1)[0]
    return re.findall(r"<td>\d+</td>\s*<td>([^<]+)</td>", table)


def booking_rows(html: str) -> list[list[str]]:
    """Pull each row of the admin bookings table."""
    body = html.split("<tbody>", 1)[1].split("</tbody>", 1)[0]
    return [re.findall(r"<td>([^<]*)</td>", row) for row in body.split("</tr>") if "<td>" in row]


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Application wired to a fresh SQLite database."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'web.db'}")
    get_settings.cache_clear()
    services.reset_service_factory()

    yield create_app()

    services.reset_service_factory()
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def client(app):
    """HTTP client with services initialized and the catalog seeded."""
    await services.initialize_services()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await services.shutdown_services()


class TestHomePage:
    """Test cases for GET /."""

    @pytest.mark.asyncio
    async def test_home_lists_seeded_cars(self, client):
        """Test the three seeded cars are offered."""
        response = await client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert available_car_names(response.text) == ["Honda City", "Maruti Swift", "Mahindra Scorpio"]
        assert 'action="/book"' in response.text

    @pytest.mark.asyncio
    async def test_home_sets_correlation_id(self, client):
        """Test the correlation ID header is echoed back."""
        response = await client.get("/", headers={"X-Correlation-ID": "req-42"})

        assert response.headers["X-Correlation-ID"] == "req-42"

    @pytest.mark.asyncio
    async def test_home_generates_correlation_id(self, client):
        """Test a correlation ID is generated when absent."""
        response = await client.get("/")

        assert response.headers["X-Correlation-ID"]


class TestBookCar:
    """Test cases for POST /book."""

    @pytest.mark.asyncio
    async def test_successful_booking(self, client):
        """Test booking shows the confirmation and removes the car."""
        response = await client.post("/book", data=BOOKING_FORM)

        assert response.status_code == 200
        assert "Booking successful for Honda City" in response.text
        assert 'class="error"' not in response.text
        assert available_car_names(response.text) == ["Maruti Swift", "Mahindra Scorpio"]

        home = await client.get("/")
        assert "Honda City" not in available_car_names(home.text)

    @pytest.mark.asyncio
    async def test_invalid_date_range(self, client):
        """Test reversed dates show the date error and change nothing."""
        response = await client.post(
            "/book",
            data={**BOOKING_FORM, "startDate": "2024-01-10", "endDate": "2024-01-05"}
        )

        assert response.status_code == 200
        assert "Start date must be before or equal to end date." in response.text
        assert available_car_names(response.text) == ["Honda City", "Maruti Swift", "Mahindra Scorpio"]

        admin = await client.get("/admin/bookings")
        assert booking_rows(admin.text) == []

    @pytest.mark.asyncio
    async def test_invalid_date_range_with_unknown_car(self, client):
        """Test the date error wins when the car is also unknown."""
        response = await client.post(
            "/book",
            data={**BOOKING_FORM, "carId": "99", "startDate": "2024-01-10", "endDate": "2024-01-05"}
        )

        assert "Start date must be before or equal to end date." in response.text
        assert "Car not found." not in response.text

    @pytest.mark.asyncio
    async def test_car_not_found(self, client):
        """Test an unknown car shows the not-found error and the car list."""
        response = await client.post("/book", data={**BOOKING_FORM, "carId": "99"})

        assert response.status_code == 200
        assert "Car not found." in response.text
        assert len(available_car_names(response.text)) == 3

    @pytest.mark.asyncio
    async def test_booked_car_can_be_booked_again(self, client):
        """Test a second booking of an unavailable car still succeeds."""
        await client.post("/book", data=BOOKING_FORM)
        response = await client.post("/book", data={**BOOKING_FORM, "name": "Bob"})

        assert "Booking successful for Honda City" in response.text

        admin = await client.get("/admin/bookings")
        assert [row[1] for row in booking_rows(admin.text)] == ["Bob", "Alice"]

    @pytest.mark.asyncio
    async def test_missing_fields_rejected(self, client):
        """Test incomplete forms fail request validation."""
        response = await client.post("/book", data={"name": "Alice", "carId": "1"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, client):
        """Test an empty customer name counts as missing."""
        response = await client.post("/book", data={**BOOKING_FORM, "name": ""})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_whitespace_name_rejected(self, client):
        """Test a name of only spaces fails validation and books nothing."""
        response = await client.post("/book", data={**BOOKING_FORM, "name": "   "})

        assert response.status_code == 422
        home = await client.get("/")
        assert available_car_names(home.text) == ["Honda City", "Maruti Swift", "Mahindra Scorpio"]

    @pytest.mark.asyncio
    async def test_malformed_date_rejected(self, client):
        """Test a non-ISO date fails request validation."""
        response = await client.post("/book", data={**BOOKING_FORM, "startDate": "next tuesday"})

        assert response.status_code == 422


class TestAdminBookings:
    """Test cases for GET /admin/bookings."""

    @pytest.mark.asyncio
    async def test_empty_ledger(self, client):
        """Test the admin page renders with no bookings."""
        response = await client.get("/admin/bookings")

        assert response.status_code == 200
        assert "All Bookings" in response.text
        assert booking_rows(response.text) == []

    @pytest.mark.asyncio
    async def test_bookings_newest_first(self, client):
        """Test bookings are listed by descending ID with their snapshot data."""
        await client.post("/book", data=BOOKING_FORM)
        await client.post(
            "/book",
            data={"name": "Bob", "carId": "3", "startDate": "2024-02-01", "endDate": "2024-02-03"}
        )

        response = await client.get("/admin/bookings")

        assert booking_rows(response.text) == [
            ["2", "Bob", "3", "Mahindra Scorpio", "2024-02-01", "2024-02-03", "3"],
            ["1", "Alice", "1", "Honda City", "2024-01-05", "2024-01-10", "6"],
        ]

    @pytest.mark.asyncio
    async def test_admin_listing_is_repeatable(self, client):
        """Test two reads without writes return the same page."""
        await client.post("/book", data=BOOKING_FORM)

        first = await client.get("/admin/bookings")
        second = await client.get("/admin/bookings")

        assert booking_rows(first.text) == booking_rows(second.text)


class TestHealthAndErrors:
    """Test cases for health and error handling."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        """Test the health probe."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "car-rental"}

    @pytest.mark.asyncio
    async def test_database_not_connected(self, app):
        """Test requests before startup return a 500 JSON error."""
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/")

        assert response.status_code == 500
        assert response.json()["type"] == "runtime_error"
