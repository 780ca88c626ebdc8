"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from cafe_directory.services import CafeService

    # Using factory method (recommended)
    service = CafeService.create()

    # Or manual creation
    service = CafeService(directory=StaticCafeDirectory(listings))
    ```
"""

from .cafe_service import CafeService

__all__ = [
    "CafeService",
]
