"""Café Directory - per-city café listings over HTTP.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CafeDirectory)
    - repositories: Data access implementations (StaticCafeDirectory)
    - services: Business logic (CafeService)
    - handlers: HTTP endpoint handlers (CafeHandler)
    - dto: Data transfer objects (API and data file contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from cafe_directory.services import CafeService

    service = CafeService.create()
    service.find_cafes("moscow", count="2")
    ```

For HTTP API:
    ```python
    from cafe_directory.api.app import app
    ```
"""

__version__ = "0.1.0"

from cafe_directory.config import get_settings, settings
from cafe_directory.dto import CafeQuery, CafeRecord, DirectoryFile
from cafe_directory.entities import CafeEntity
from cafe_directory.errors import (
    CafeDirectoryError,
    DirectoryLoadError,
    InvalidCountError,
    UnknownCityError,
)
from cafe_directory.handlers import CafeHandler
from cafe_directory.protocols import CafeDirectory
from cafe_directory.repositories import StaticCafeDirectory
from cafe_directory.services import CafeService

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Errors
    "CafeDirectoryError",
    "UnknownCityError",
    "InvalidCountError",
    "DirectoryLoadError",
    # Protocols (interfaces)
    "CafeDirectory",
    # Services (business logic)
    "CafeService",
    # Handlers (HTTP)
    "CafeHandler",
    # Repositories (data access)
    "StaticCafeDirectory",
    # Entities (domain models)
    "CafeEntity",
    # DTOs (API contracts)
    "CafeQuery",
    "CafeRecord",
    "DirectoryFile",
]
