"""Café directory protocol.

Defines the read-only interface the service layer needs from a
city -> cafés listing. Implementations must never change their contents
after construction, since one instance is shared by every request.
"""

from typing import Protocol, runtime_checkable

from cafe_directory.entities import CafeEntity


@runtime_checkable
class CafeDirectory(Protocol):
    """Protocol for read-only café directories.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def cities(self) -> list[str]:
        """Return the supported city keys, sorted.

        Returns:
            Sorted list of city names
        """
        ...

    def has_city(self, city: str) -> bool:
        """Check whether a city is supported (exact, case-sensitive match).

        Args:
            city: The city key to look up

        Returns:
            True if the city is a directory key, False otherwise
        """
        ...

    def get_cafes(self, city: str) -> tuple[CafeEntity, ...]:
        """Return the ordered cafés for a city.

        Args:
            city: The city key to look up

        Returns:
            Cafés in stored order

        Raises:
            KeyError: If the city is not supported
        """
        ...
