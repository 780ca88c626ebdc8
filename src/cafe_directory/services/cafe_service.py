"""Café lookup service.

Validates the raw query values, then narrows a city's listing by name
search and by a prefix limit.
"""

import logging
import re

from cafe_directory.entities import CafeEntity
from cafe_directory.errors import InvalidCountError, UnknownCityError
from cafe_directory.protocols import CafeDirectory
from cafe_directory.repositories import StaticCafeDirectory

logger = logging.getLogger(__name__)

_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Largest accepted limit (signed 64-bit).
MAX_COUNT = 2**63 - 1


class CafeService:
    """Core café lookup service.

    Depends on the CafeDirectory protocol, so any read-only listing
    (embedded data, a data file, a test double) can back it.

    Example:
        ```python
        from cafe_directory.services import CafeService

        service = CafeService.create()
        service.find_cafes("moscow", count="2")
        service.find_cafes("moscow", search="кофе")
        ```
    """

    def __init__(self, directory: CafeDirectory) -> None:
        """Initialize the café service.

        Args:
            directory: Read-only café directory (required).
        """
        self._directory = directory

    @classmethod
    def create(cls, directory: CafeDirectory | None = None) -> "CafeService":
        """Factory method to create CafeService with sensible defaults.

        Args:
            directory: Café directory. If None, builds StaticCafeDirectory
                       from settings (data file or embedded defaults).

        Returns:
            Configured CafeService
        """
        if directory is None:
            directory = StaticCafeDirectory.create()
        return cls(directory=directory)

    def find_cafes(
        self,
        city: str | None,
        count: str | None = None,
        search: str = "",
    ) -> list[CafeEntity]:
        """Find cafés for a city.

        Business logic:
        1. Reject a missing or unsupported city
        2. Reject a count that is not a non-negative integer
        3. Keep cafés whose name contains search (case-insensitive)
        4. Keep at most count cafés from the front

        Args:
            city: City key, exact match
            count: Raw count text; None or "" means no limit
            search: Name substring; "" means no filtering

        Returns:
            Matching cafés in stored order

        Raises:
            UnknownCityError: If the city is missing or unsupported
            InvalidCountError: If count is present but invalid
        """
        if not city or not self._directory.has_city(city):
            raise UnknownCityError()

        limit = self.parse_count(count)
        cafes = self._directory.get_cafes(city)

        if search:
            needle = search.casefold()
            cafes = tuple(cafe for cafe in cafes if needle in cafe.name.casefold())

        if limit is not None:
            cafes = cafes[:limit]

        logger.debug("city=%s search=%r limit=%s -> %d cafés", city, search, limit, len(cafes))
        return list(cafes)

    @staticmethod
    def parse_count(count: str | None) -> int | None:
        """Parse the raw count parameter.

        Accepts an optional sign followed by ASCII digits, in the range
        0..MAX_COUNT.

        Args:
            count: Raw query value

        Returns:
            The limit, or None when count is absent or empty

        Raises:
            InvalidCountError: If count is not an integer or is out of range
        """
        if count is None or count == "":
            return None

        if not _COUNT_PATTERN.fullmatch(count):
            raise InvalidCountError()

        try:
            value = int(count)
        except ValueError as e:
            raise InvalidCountError() from e

        if not 0 <= value <= MAX_COUNT:
            raise InvalidCountError()
        return value

    def cities(self) -> list[str]:
        """Return supported city keys, sorted."""
        return self._directory.cities()
