"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - The directory is built before the first request and never replaced
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from cafe_directory.config import settings
from cafe_directory.handlers import CafeHandler
from cafe_directory.logging_config import setup_logging
from cafe_directory.repositories import StaticCafeDirectory
from cafe_directory.services import CafeService

logger = logging.getLogger(__name__)


def get_cafe_service(request: Request) -> CafeService:
    """Dependency injection for CafeService from app.state.

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "cafe_service", None)
    if service is None:
        raise RuntimeError("CafeService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> CafeHandler:
    """Dependency injection for CafeHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CafeHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "cafe_handler", None)
    if handler is None:
        raise RuntimeError("CafeHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Directory (data access) - embedded defaults or CAFE_DATA_PATH
    2. Service (business logic) - app.state.cafe_service
    3. Handler (HTTP endpoints) - app.state.cafe_handler

    A directory file that fails to load raises DirectoryLoadError here,
    so the server never starts serving with a partial listing.
    """
    setup_logging(settings.log_level)

    directory = StaticCafeDirectory.create()
    cafe_service = CafeService.create(directory=directory)
    cafe_handler = CafeHandler(cafe_service=cafe_service)

    app.state.cafe_service = cafe_service
    app.state.cafe_handler = cafe_handler

    logger.info("Café directory ready: %d cities (%s)", len(directory), ", ".join(directory.cities()))

    yield

    del app.state.cafe_handler
    del app.state.cafe_service
    logger.info("Café directory shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CafeHandler, Depends(get_handler)]
ServiceDep = Annotated[CafeService, Depends(get_cafe_service)]
