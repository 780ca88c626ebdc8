"""HTTP handlers for café lookups.

Handlers convert query DTOs into service calls and service results into
responses. Validation errors are left to propagate; the app turns them
into plain-text 400 responses.
"""

from collections.abc import Iterable

from fastapi.responses import PlainTextResponse

from cafe_directory.dto import CafeQuery, HealthCheckResponse
from cafe_directory.entities import CafeEntity
from cafe_directory.services import CafeService

NAME_DELIMITER = ","


def serialize_names(cafes: Iterable[CafeEntity]) -> str:
    """Join café names with commas, in order. No cafés gives an empty string."""
    return NAME_DELIMITER.join(cafe.name for cafe in cafes)


class CafeHandler:
    """HTTP handlers for café operations.

    Example:
        ```python
        handler = CafeHandler(cafe_service=CafeService.create())

        @app.get("/cafe", response_class=PlainTextResponse)
        async def get_cafes(query: CafeQuery = Depends()):
            return await handler.list_cafes(query)
        ```
    """

    def __init__(self, cafe_service: CafeService) -> None:
        """Initialize the café handler.

        Args:
            cafe_service: The café service for business logic (required).
        """
        self._cafes = cafe_service

    async def list_cafes(self, query: CafeQuery) -> PlainTextResponse:
        """Handle GET /cafe requests.

        Args:
            query: The raw query parameters

        Returns:
            PlainTextResponse with comma-separated café names

        Raises:
            UnknownCityError: If the city is missing or unsupported
            InvalidCountError: If count is present but invalid
        """
        cafes = self._cafes.find_cafes(
            city=query.city,
            count=query.count,
            search=query.search,
        )
        return PlainTextResponse(serialize_names(cafes))

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse; unhealthy when the directory is empty
        """
        cities = len(self._cafes.cities())
        return HealthCheckResponse(
            status="healthy" if cities > 0 else "unhealthy",
            cities=cities,
        )
