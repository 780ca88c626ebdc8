"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .cafe_handler import CafeHandler, serialize_names

__all__ = [
    "CafeHandler",
    "serialize_names",
]
