"""Data Transfer Objects for API contracts and data files.

These Pydantic models define the external contracts: query parameters,
JSON responses for the informational endpoints and the on-disk format
of directory data files.

Internal domain logic should use entities from the entities package.
"""

from .directory_file import CafeRecord, DirectoryFile
from .requests import CafeQuery
from .responses import CitiesResponse, HealthCheckResponse

__all__ = [
    "CafeQuery",
    "CafeRecord",
    "DirectoryFile",
    "CitiesResponse",
    "HealthCheckResponse",
]
