"""Repository layer for data access.

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from cafe_directory.protocols import CafeDirectory

from .default_data import DEFAULT_CAFES
from .static_directory import StaticCafeDirectory

__all__ = [
    "CafeDirectory",
    "DEFAULT_CAFES",
    "StaticCafeDirectory",
]
