import logging
from typing import Annotated, Any

import uvicorn
from fastapi import FastAPI, Query, Request
from fastapi.responses import PlainTextResponse

from cafe_directory import __version__
from cafe_directory.api.dependencies import HandlerDep, ServiceDep, lifespan
from cafe_directory.config import settings
from cafe_directory.dto import CafeQuery, CitiesResponse, HealthCheckResponse
from cafe_directory.errors import CafeDirectoryError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Café Directory API",
    description="Per-city café listings with name search and result limiting",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(CafeDirectoryError)
async def cafe_directory_error_handler(request: Request, exc: CafeDirectoryError) -> PlainTextResponse:
    """Send validation errors back as a single plain-text line."""
    logger.info("Rejected %s?%s: %s", request.url.path, request.url.query, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Café Directory API",
        "version": __version__,
        "endpoints": {
            "cafe": "/cafe",
            "cities": "/cities",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/cities", response_model=CitiesResponse)
async def cities(service: ServiceDep) -> CitiesResponse:
    """List supported cities."""
    return CitiesResponse(cities=service.cities())


@app.get("/cafe", response_class=PlainTextResponse)
async def cafe(query: Annotated[CafeQuery, Query()], handler: HandlerDep) -> PlainTextResponse:
    """
    List cafés of a city as comma-separated names.

    Args:
        query: city (required), count (optional limit), search (optional name substring).

    Returns:
        Plain-text body, empty when nothing matches.
    """
    return await handler.list_cafes(query)


def main() -> None:
    """Run the API with uvicorn using the configured host and port."""
    uvicorn.run(
        "cafe_directory.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
